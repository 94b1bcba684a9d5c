"""Request middleware attaching the detected locale to request state."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from island_i18n.i18n.factory import I18n
from island_i18n.i18n.models import I18nState


class I18nMiddleware(BaseHTTPMiddleware):
    """Detect the locale of each request and store it on ``request.state``.

    Sets ``request.state.locale``, ``request.state.translations`` and
    ``request.state.i18n`` (the full I18nState) before calling the next
    handler.

    Usage:
        app = FastAPI()
        app.add_middleware(I18nMiddleware, i18n=i18n)
    """

    def __init__(self, app, i18n: I18n):
        super().__init__(app)
        self.i18n = i18n

    async def dispatch(self, request, call_next):
        state = self.i18n.create_state(request)
        request.state.i18n = state
        request.state.locale = state.locale
        request.state.translations = state.translations
        response = await call_next(request)
        return response


def get_i18n_state(request: Request) -> I18nState:
    """Return the I18nState stored by I18nMiddleware.

    Raises:
        AttributeError: If I18nMiddleware did not run for this request.
    """
    return request.state.i18n
