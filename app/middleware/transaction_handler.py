from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from functools import wraps
import logging

from app.utils.exceptions import CatalogError, ProductValidationError

logger = logging.getLogger(__name__)


def transactional(func):
    """
    Décorateur de transaction pour les méthodes d'écriture des services.
    Commit si la méthode réussit, rollback sinon. Un document refusé par la
    base (type ou contrainte) est remonté comme ProductValidationError.
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        db: Session = self.db
        try:
            result = func(self, *args, **kwargs)
            db.commit()
            logger.debug(f"Transaction committed in {func.__name__}")
            return result
        except CatalogError:
            db.rollback()
            raise
        except (IntegrityError, DataError) as e:
            db.rollback()
            logger.warning(f"Store rejected document in {func.__name__}: {e}")
            raise ProductValidationError(str(getattr(e, "orig", None) or e)) from e
        except Exception as e:
            db.rollback()
            logger.error(f"Transaction failed in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
