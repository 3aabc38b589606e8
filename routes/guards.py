from functools import wraps

from flask_login import current_user

from services.errors import AuthorizationError
from services.principal import Principal


def current_principal() -> Principal:
    return Principal(user_id=int(current_user.id), role=current_user.role)


def require_roles(*allowed_roles):
    """Valida:

    - Sesión activa (si no: 401)
    - Usuario activo con rol permitido (si no: 403)

    No se consulta nada antes de pasar esta validación.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if not current_user.is_authenticated:
                raise AuthorizationError(status_code=401)

            if not current_user.is_active or current_user.role not in allowed_roles:
                raise AuthorizationError()

            return fn(*args, **kwargs)

        return wrapper

    return decorator
