import html

from starlette.responses import HTMLResponse


class ErrorPage:
    """Page used to report requests the app cannot serve."""

    def __init__(self, error_title: str, error_detail: str, status_code: int = 404):
        self.error_title = error_title
        self.error_detail = error_detail
        self.status_code = status_code

    async def render(self) -> HTMLResponse:
        """Render the error page."""
        escaped_detail = html.escape(self.error_detail)
        content = f"""
        <!DOCTYPE html>
        <html>
        <head>
            <title>Favlink: {html.escape(self.error_title)}</title>
            <style>
                body {{
                    font-family: system-ui, -apple-system, sans-serif;
                    padding: 2rem;
                    background: #fff0f0;
                    color: #333;
                }}
                .error-container {{
                    max-width: 900px;
                    margin: 0 auto;
                    background: white;
                    padding: 2rem;
                    border-radius: 8px;
                    box-shadow: 0 4px 6px rgba(0,0,0,0.1);
                    border-left: 6px solid #ff4444;
                }}
                h1 {{
                    margin-top: 0;
                    color: #cc0000;
                }}
            </style>
        </head>
        <body>
            <div class="error-container">
                <h1>{html.escape(self.error_title)}</h1>
                <p>{escaped_detail}</p>
            </div>
        </body>
        </html>
        """
        return HTMLResponse(content, status_code=self.status_code)
