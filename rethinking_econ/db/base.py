"""Import all models for Alembic or metadata creation."""

from rethinking_econ.models.about import AboutCard, AboutSection, HistoryMilestone, Partner, TeamMember
from rethinking_econ.models.contact import ContactSubmission
from rethinking_econ.models.event import Event, EventMedia, Initiative
from rethinking_econ.models.media import MediaAppearance, PressRelease
from rethinking_econ.models.membership import FAQ, CollaborationCard, Membership, MembershipType
from rethinking_econ.models.policy import AdvocacyCampaign, CaseStudy, Policy
from rethinking_econ.models.profile import Profile
from rethinking_econ.models.publication import (
    Category,
    Publication,
    PublicationCategory,
    PublicationTag,
    Tag,
)

__all__ = [
    "Profile",
    "AboutSection",
    "AboutCard",
    "HistoryMilestone",
    "TeamMember",
    "Partner",
    "Event",
    "EventMedia",
    "Initiative",
    "Policy",
    "CaseStudy",
    "AdvocacyCampaign",
    "MembershipType",
    "Membership",
    "FAQ",
    "CollaborationCard",
    "Category",
    "Tag",
    "Publication",
    "PublicationCategory",
    "PublicationTag",
    "PressRelease",
    "MediaAppearance",
    "ContactSubmission",
]
