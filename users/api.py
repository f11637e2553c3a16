from ninja import Router
from ninja.errors import HttpError
from django.contrib.auth import authenticate
from ninja_jwt.exceptions import TokenError
from ninja_jwt.tokens import RefreshToken
import structlog

from users.schemas import AuthIn, RefreshIn, TokenOut, AccessTokenOut, UserOut

router = Router(tags=["auth"])
logger = structlog.get_logger(__name__)

@router.post("/login", response=TokenOut, auth=None)
def login(request, payload: AuthIn):
    """Аутентификация пользователя, выдача пары JWT токенов"""
    user = authenticate(request, username=payload.username, password=payload.password)

    if not user:
        logger.warning("login_failed", username=payload.username)
        raise HttpError(401, "Invalid credentials")

    refresh = RefreshToken.for_user(user)

    logger.info("user_logged_in", user_id=str(user.id), username=user.username)

    return {
        "access": str(refresh.access_token),
        "refresh": str(refresh),
        "user": user,
    }

@router.post("/refresh", response=AccessTokenOut, auth=None)
def refresh_token(request, payload: RefreshIn):
    """Новый access токен по refresh токену"""
    try:
        refresh = RefreshToken(payload.refresh)
    except TokenError as exc:
        logger.warning("token_refresh_failed", error=str(exc))
        raise HttpError(401, "Invalid or expired refresh token")

    return {"access": str(refresh.access_token)}

@router.get("/me", response=UserOut)
def get_current_user(request):
    """Получение информации о текущем пользователе"""
    return request.auth
