import logging

from cq_post.common import UnitType
from cq_post.post import PostProcessor
from cq_post.posts.grbl import Grbl
from cq_post.posts.mekanika import Mekanika

logger = logging.getLogger(__name__)

POST_PROCESSORS: dict[str, type[PostProcessor]] = {
    "grbl": Grbl,
    "mekanika": Mekanika,
}


def get_post_processor(
    name: str, unit_type: UnitType = UnitType.MILLIMETER
) -> PostProcessor:
    try:
        cls = POST_PROCESSORS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown post processor {name!r}, expected one of {sorted(POST_PROCESSORS)}"
        ) from None
    logger.debug("Using post processor %s (%s)", cls.name, unit_type)
    return cls(unit_type)


__all__ = [
    "POST_PROCESSORS",
    "get_post_processor",
    "Grbl",
    "Mekanika",
]
