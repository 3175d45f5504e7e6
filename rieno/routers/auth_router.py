from fastapi import APIRouter, Depends, Response

from rieno.dependencies import get_current_user, get_optional_user, get_settings, get_store
from rieno.schemas.auth_schemas import LoginRequest, SignupRequest
from rieno.services import auth_service

auth_router = APIRouter(prefix="/auth")

@auth_router.post("/login")
def login(body: LoginRequest, response: Response, store=Depends(get_store), settings=Depends(get_settings)):
    data = auth_service.login(store, settings, body, response)
    return {"success": True, "data": data}

@auth_router.post("/signup", status_code=201)
def signup(body: SignupRequest, response: Response, store=Depends(get_store), settings=Depends(get_settings)):
    data = auth_service.signup(store, settings, body, response)
    return {"success": True, "data": data}

@auth_router.post("/logout")
def logout(response: Response, store=Depends(get_store), settings=Depends(get_settings), user=Depends(get_optional_user)):
    auth_service.logout(store, settings, user, response)
    return {"success": True, "message": "Logged out successfully"}

@auth_router.get("/me")
def me(store=Depends(get_store), user=Depends(get_current_user)):
    return {"success": True, "data": auth_service.me(store, user)}
