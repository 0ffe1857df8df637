# External package imports
from fastapi import APIRouter, status

# Local application imports
from ..application.dto.auth_dto import SignupRequest, LoginRequest, TokenResponse, MessageResponse
from ..application.use_cases.auth.register_user import RegisterUserUseCase
from ..application.use_cases.auth.login_user import LoginUserUseCase
from ..di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest) -> MessageResponse:
    """
    Register a new account

    Args:
        request: Signup request with username and password

    Returns:
        Confirmation message (no user data is echoed)
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    await register_use_case.execute(request)
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest) -> TokenResponse:
    """
    Authenticate a user and get an access token

    Args:
        request: Login request with username and password

    Returns:
        TokenResponse with a bearer token valid for one hour
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    return await login_use_case.execute(request)
