from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from staff_api.api.v1.staff import router as staff_router
from staff_api.core.config import Settings, get_settings
from staff_api.core.exceptions import register_exception_handlers
from staff_api.core.logging import configure_logging
from staff_api.db.session import make_engine, make_session_factory
from staff_api.middlewares.rate_limit import RateLimitMiddleware, RateLimitRule
from staff_api.middlewares.request_context import RequestContextMiddleware
from staff_api.middlewares.security_headers import SecurityHeadersMiddleware


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = make_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_TABLES:
            from staff_api.db.base import Base
            import staff_api.models.staff  # noqa: F401

            Base.metadata.create_all(bind=engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    # added last runs first: session -> request context -> rate limit -> headers
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        rule=RateLimitRule(window_sec=settings.LOGIN_RATE_WINDOW_SEC, max_requests=settings.LOGIN_RATE_LIMIT),
        paths=["/staff/login"],
        key_prefix="login",
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
    )

    register_exception_handlers(app)
    app.include_router(staff_router)
    return app


app = create_app()
