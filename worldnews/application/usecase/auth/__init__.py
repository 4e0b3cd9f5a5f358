"""Auth use cases."""

from .guest_login import GuestLoginResponse, GuestLoginUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase
from .resolve_session import (
    ResolveSessionRequest,
    ResolveSessionResponse,
    ResolveSessionUseCase,
)

__all__ = [
    "GuestLoginResponse",
    "GuestLoginUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "ResolveSessionRequest",
    "ResolveSessionResponse",
    "ResolveSessionUseCase",
]
