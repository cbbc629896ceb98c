from dishka import AsyncContainer, Provider, from_context, make_async_container
from starlette.requests import Request

from impact.config import Config
from impact.domain.report.util.di.provider import ReportProvider
from impact.infrastructure.http.di import HttpProvider
from impact.util.di.scope import Scope


class ContextProvider(Provider):
    """Values handed to the container from outside rather than built by it."""

    config = from_context(provides=Config, scope=Scope.APP)
    request = from_context(provides=Request, scope=Scope.UOW)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ContextProvider(),
        HttpProvider(),
        ReportProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
