from rieno.errors import RienoError
from rieno.schemas.auth_schemas import public_profile
from rieno.utils.logging_utils import get_logger
from rieno.utils.tokens import clear_session_cookie, create_session_token, set_session_cookie

logger = get_logger("auth")


def _start_session(response, user, settings):
    token = create_session_token(user["id"], user["email"], settings)
    set_session_cookie(response, token, settings)
    return {"user": public_profile(user)}


def login(store, settings, req, response):
    user = store.sign_in(req.email, req.password)
    logger.info(f"Login: user_id={user['id']}")
    return _start_session(response, user, settings)


def signup(store, settings, req, response):
    user = store.sign_up(req.email, req.password, req.first_name, req.last_name)
    logger.info(f"Signup: user_id={user['id']}")
    return _start_session(response, user, settings)


def logout(store, settings, session_user, response):
    # the cookie goes regardless of what the remote service says
    clear_session_cookie(response, settings)
    if session_user is None:
        return
    try:
        store.sign_out(session_user.user_id)
    except RienoError as e:
        logger.warning(f"Remote sign out failed for {session_user.user_id}: {e.message}")


def me(store, session_user):
    return public_profile(store.get_user(session_user.user_id))
