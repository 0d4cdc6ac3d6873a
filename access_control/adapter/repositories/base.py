import functools
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from access_control.app.errors import DuplicateRecordError, UpstreamError

logger = logging.getLogger(__name__)


def storage_call(func):
    """Translate SQLAlchemy failures into application storage errors"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except IntegrityError as exc:
            logger.warning(f"Integrity violation in {func.__qualname__}: {exc.orig}")
            raise DuplicateRecordError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"Storage failure in {func.__qualname__}: {exc}")
            raise UpstreamError() from exc

    return wrapper
