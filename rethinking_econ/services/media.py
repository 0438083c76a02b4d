from rethinking_econ.models.media import MediaAppearance, PressRelease
from rethinking_econ.services.crud import ResourceService

press_releases = ResourceService(
    PressRelease,
    order_by=(PressRelease.release_date.desc(), PressRelease.id.desc()),
)
appearances = ResourceService(
    MediaAppearance,
    order_by=(MediaAppearance.date.desc(), MediaAppearance.id.desc()),
)
