from fastapi import Depends, HTTPException, Request

from rieno.errors import InvalidSessionError
from rieno.utils.tokens import decode_session_token


def get_settings(request: Request):
    return request.app.state.settings


def get_store(request: Request):
    return request.app.state.store


def get_current_user(request: Request, settings=Depends(get_settings)):
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise HTTPException(status_code=401, detail="Access token required")
    return decode_session_token(token, settings)


def get_optional_user(request: Request, settings=Depends(get_settings)):
    token = request.cookies.get(settings.cookie_name)
    if not token:
        return None
    try:
        return decode_session_token(token, settings)
    except InvalidSessionError:
        return None
