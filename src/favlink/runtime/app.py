"""Main ASGI application."""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from favlink import __version__
from favlink.core.models import RenderRequest, StyleContext
from favlink.core.styles import PRESETS
from favlink.exceptions import ContentNotFoundError
from favlink.runtime.context import request_context
from favlink.runtime.error_page import ErrorPage
from favlink.runtime.page import ContentPage, default_shortcodes
from favlink.runtime.plugin import Favlink

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class FavlinkApp:
    """ASGI application serving content pages with favicon links expanded."""

    def __init__(self, content_dir: Optional[str] = None, debug: bool = False):
        if content_dir is None:
            # Auto-discovery
            cwd = Path.cwd()
            potential_paths = [cwd / "content", cwd / "src" / "content"]

            self.content_dir = Path("content")
            for path in potential_paths:
                if path.exists() and path.is_dir():
                    self.content_dir = path
                    break
        else:
            self.content_dir = Path(content_dir)

        if not self.content_dir.exists():
            print(f"Warning: Content directory '{self.content_dir}' does not exist.")

        self.debug = debug
        self.shortcodes = default_shortcodes()

        routes = [
            Route("/_favlink/capabilities", self._handle_capabilities, methods=["GET"]),
            Route("/_favlink/style.css", self._handle_stylesheet, methods=["GET"]),
            Route("/_favlink/render", self._handle_render, methods=["POST"]),
            Route("/_favlink/preview", self._handle_preview, methods=["POST"]),
            # Default content handler (catch-all, must be last)
            Route("/{path:path}", self._handle_request, methods=["GET"]),
        ]

        self.app = Starlette(debug=debug, routes=routes)
        self.app.state.favlink = self

    async def _handle_capabilities(self, request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "version": __version__,
                "handles": {context.name.lower(): context.handle for context in StyleContext},
                "presets": list(PRESETS),
            }
        )

    async def _handle_stylesheet(self, request: Request) -> Response:
        """Serve the stylesheet for ?context=frontend|editor."""
        try:
            context = StyleContext.from_name(request.query_params.get("context", "frontend"))
        except ValueError as e:
            return PlainTextResponse(str(e), status_code=400)
        return Response(Favlink.styles(context), media_type="text/css")

    async def _read_json(self, request: Request) -> dict:
        try:
            data = await request.json()
        except json.JSONDecodeError:
            raise ValueError("Request body must be JSON") from None
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data

    async def _handle_render(self, request: Request) -> JSONResponse:
        """Render one link from a JSON attribute object."""
        try:
            data = await self._read_json(request)
            attrs = RenderRequest.model_validate(data)
        except (ValueError, ValidationError) as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        with request_context() as context:
            markup = Favlink.render_shortcode(attrs)
        return JSONResponse({"html": markup, "needs_styles": context.needs_css})

    async def _handle_preview(self, request: Request) -> Response:
        """Render posted content as a full page (front end or editor canvas)."""
        try:
            data = await self._read_json(request)
        except ValueError as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        content = data.get("content", "")
        if not isinstance(content, str):
            return JSONResponse({"error": "'content' must be a string"}, status_code=400)

        page = ContentPage(content, editor=bool(data.get("editor", False)), shortcodes=self.shortcodes)
        return HTMLResponse(await page.render())

    def resolve_content(self, path: str) -> Path:
        """Map a request path to a file inside the content directory."""
        relative = path.strip("/") or "index.html"
        if not Path(relative).suffix:
            relative = f"{relative}.html"

        root = self.content_dir.resolve()
        target = (root / relative).resolve()
        if root not in target.parents or not target.is_file():
            raise ContentNotFoundError(path)
        return target

    async def _handle_request(self, request: Request) -> Response:
        """Render a content file."""
        path = request.path_params.get("path", "")
        try:
            target = self.resolve_content(path)
        except ContentNotFoundError:
            logger.debug("No content for /%s", path)
            page = ErrorPage("404 Not Found", f"The path '/{path}' could not be found.")
            return await page.render()

        editor = request.query_params.get("editor", "").lower() in _TRUTHY
        logger.debug("Rendering %s (editor=%s)", target, editor)
        page = ContentPage(
            target.read_text(encoding="utf-8"),
            editor=editor,
            title=target.stem,
            shortcodes=self.shortcodes,
        )
        return HTMLResponse(await page.render())

    async def __call__(self, scope, receive, send):
        """ASGI interface."""
        await self.app(scope, receive, send)
