import logging
from collections.abc import Awaitable, Callable

from fastapi import Depends, FastAPI, status
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .exceptions import GitError, UnsupportedProviderError
from .factory import GitServiceFactory
from .models import AddIssueRequest, ErrorResponse, ModifyIssueRequest, SuccessResponse
from .services.protocols import GitService

# Setup logging - will be configured on startup
logger = logging.getLogger(__name__)

app = FastAPI(title="GitIssuer", version="0.1.0")


@app.on_event("startup")
async def configure_logging() -> None:
    """Configure logging level from settings on startup."""
    try:
        settings = get_settings()
        log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,  # Override any existing config
        )
        logger.info(f"Logging configured with level: {settings.LOG_LEVEL.upper()}")
    except Exception as e:
        # Fallback to INFO if settings fail
        logging.basicConfig(level=logging.INFO)
        logger.warning(f"Failed to load LOG_LEVEL from settings, using INFO: {e}")


def get_git_service_factory(settings: Settings = Depends(get_settings)) -> GitServiceFactory:
    return GitServiceFactory(settings)


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _execute(
    factory: GitServiceFactory,
    provider: str,
    action: Callable[[GitService], Awaitable[str]],
    success_status: int,
) -> JSONResponse:
    """Resolve the provider service, run the action and map the outcome to a response.

    Args:
        factory: Service factory
        provider: Provider name from the route
        action: Operation to run against the resolved service
        success_status: Status code used when the action succeeds

    Returns:
        JSON response with the issue URL or an error body
    """
    try:
        service = factory.get_service(provider)
    except UnsupportedProviderError as e:
        message = f"Provided GIT provider name ({e.provider_name}) is not supported."
        details = f"Valid platforms: {', '.join(e.valid_provider_names)}."
        logger.info(f"{message} {details}")
        return _error_response(status.HTTP_400_BAD_REQUEST, message, details)
    except Exception as e:
        message = f"An unexpected error occurred while creating GitService for {provider}."
        logger.critical(f"{message} {e}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    try:
        issue_url = await action(service)
    except GitError as e:
        logger.info(f"{e.message} {e.details}")
        return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, e.message, e.details)
    except Exception as e:
        message = "An unexpected error occurred."
        logger.critical(f"{message} {e}", exc_info=True)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message, str(e))

    logger.info(f"Successfully handled {issue_url} request.")
    return JSONResponse(status_code=success_status, content=SuccessResponse(url=issue_url).model_dump())


@app.get("/health")
async def health(factory: GitServiceFactory = Depends(get_git_service_factory)) -> dict[str, object]:
    return {"status": "ok", "providers": factory.get_valid_provider_names()}


@app.post("/api/issue/{provider}/{owner}/{repo}/add", status_code=status.HTTP_201_CREATED)
async def add_issue(
    provider: str,
    owner: str,
    repo: str,
    issue: AddIssueRequest,
    factory: GitServiceFactory = Depends(get_git_service_factory),
) -> JSONResponse:
    """Create an issue in owner/repo on the given provider."""
    return await _execute(
        factory,
        provider,
        lambda service: service.add_issue(owner, repo, issue.title, issue.description),
        status.HTTP_201_CREATED,
    )


@app.put("/api/issue/{provider}/{owner}/{repo}/{issue_id}/modify")
async def modify_issue(
    provider: str,
    owner: str,
    repo: str,
    issue_id: int,
    issue: ModifyIssueRequest,
    factory: GitServiceFactory = Depends(get_git_service_factory),
) -> JSONResponse:
    """Update title and description of an issue.

    Missing fields are sent to the provider as null.
    """
    return await _execute(
        factory,
        provider,
        lambda service: service.modify_issue(owner, repo, issue_id, issue.title, issue.description),
        status.HTTP_200_OK,
    )


@app.patch("/api/issue/{provider}/{owner}/{repo}/{issue_id}/close")
async def close_issue(
    provider: str,
    owner: str,
    repo: str,
    issue_id: int,
    factory: GitServiceFactory = Depends(get_git_service_factory),
) -> JSONResponse:
    return await _execute(
        factory,
        provider,
        lambda service: service.close_issue(owner, repo, issue_id),
        status.HTTP_200_OK,
    )
