"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import (
    get_account_deletion_service,
    get_github_service,
    get_profile_service,
)
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    OwnerSummary,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
    RepositoryListResponse,
    RepositoryResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.account import Account
from domain.entities.profile import Education, Experience, Profile, ProfileFields
from domain.services.account_deletion_service import AccountDeletionService
from domain.services.github_service import GitHubService
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])


def _to_response(profile: Profile, owner: Account | None = None) -> ProfileResponse:
    """Convert a profile (and optionally its owner) into the response schema."""
    response = ProfileResponse.model_validate(profile)
    if owner:
        response.user = OwnerSummary.model_validate(owner)
    return response


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Get the caller's profile",
    responses={404: {"model": ErrorResponse, "description": "The caller has no profile yet"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with owner name and avatar."""
    result = await service.get_for_user(user.id)
    return ProfileDetailResponse(data=_to_response(result.profile, result.owner))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Create or update the caller's profile",
    responses={
        200: {"description": "Profile created or updated"},
        404: {"model": ErrorResponse, "description": "The caller's account does not exist"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the profile if absent, otherwise merge the supplied fields.

    Omitted or empty optional fields keep their stored value.
    """
    profile = await service.upsert(user.id, ProfileFields(**body.model_dump()))
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    response_model_exclude_none=True,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile with owner name and avatar."""
    results = await service.get_all()
    return ProfileListResponse(
        data=[_to_response(item.profile, item.owner) for item in results]
    )


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Get a profile by user ID",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the profile owned by ``user_id``."""
    result = await service.get_for_user(user_id)
    return ProfileDetailResponse(data=_to_response(result.profile, result.owner))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete profile, posts and account",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: AccountDeletionService = Depends(get_account_deletion_service),
) -> MessageResponse:
    """Delete the caller's posts, profile and account, in that order.

    The steps are not atomic. If one fails the request returns an error and
    can be retried.
    """
    await service.delete_account(user.id)
    return MessageResponse(message="User deleted")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Add an experience entry",
    responses={404: {"model": ErrorResponse, "description": "The caller has no profile yet"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry at the top of the caller's list."""
    experience = Experience(
        title=body.title,
        company=body.company,
        location=body.location,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_experience(user.id, experience)
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Remove an experience entry",
    responses={404: {"model": ErrorResponse, "description": "The caller has no profile yet"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_experience(user.id, exp_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Add an education entry",
    responses={404: {"model": ErrorResponse, "description": "The caller has no profile yet"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry at the top of the caller's list."""
    education = Education(
        school=body.school,
        degree=body.degree,
        field_of_study=body.field_of_study,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_education(user.id, education)
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileDetailResponse,
    response_model_exclude_none=True,
    summary="Remove an education entry",
    responses={404: {"model": ErrorResponse, "description": "The caller has no profile yet"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_education(user.id, edu_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "/github/{username}",
    response_model=RepositoryListResponse,
    summary="List a GitHub user's repositories",
    responses={404: {"model": ErrorResponse, "description": "No GitHub profile found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_github_repositories(
    request: Request,
    username: str,
    service: GitHubService = Depends(get_github_service),
) -> RepositoryListResponse:
    """Get the first repositories of a GitHub user, oldest first."""
    repositories = await service.get_repositories(username)
    return RepositoryListResponse(
        data=[RepositoryResponse.model_validate(repo) for repo in repositories]
    )
