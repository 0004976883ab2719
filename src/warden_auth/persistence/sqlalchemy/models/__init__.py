from warden_auth.persistence.sqlalchemy.models.user_model import UserModel
from warden_auth.persistence.sqlalchemy.models.user_token_model import (
    UserTokenModel,
)

__all__ = ["UserModel", "UserTokenModel"]
