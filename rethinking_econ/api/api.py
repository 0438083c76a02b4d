from fastapi import APIRouter

from rethinking_econ.api.endpoints import about, admin, contact, events, media, memberships, policy, profile, publications, search

api_router = APIRouter()
api_router.include_router(about.router, prefix="/about", tags=["about"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(policy.router, prefix="/policy", tags=["policy"])
api_router.include_router(memberships.router, prefix="/memberships", tags=["memberships"])
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(publications.router, prefix="/publications", tags=["publications"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
