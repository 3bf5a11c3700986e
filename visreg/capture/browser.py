"""Browser setup for snapshot capture."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Browser, BrowserContext, Playwright

from visreg.models.config import DEFAULT_USER_AGENT

# Sites that block headless browsers (Medium answers 403) key off navigator.webdriver.
_INIT_SCRIPT = "Object.defineProperty(navigator, 'webdriver', { get: () => false });"


async def launch_browser(playwright: Playwright, headless: bool = True) -> Browser:
    return await playwright.chromium.launch(
        headless=headless,
        args=["--disable-blink-features=AutomationControlled"],
    )


async def create_context(
    browser: Browser,
    viewport: dict,
    user_agent: Optional[str] = None,
    extra_headers: Optional[dict[str, str]] = None,
    record_video_dir: str | None = None,
) -> BrowserContext:
    """Create a browser context sized to ``viewport``.

    Args:
        extra_headers: HTTP headers sent with every request from the context.
        record_video_dir: When given, pages in this context are recorded as
            .webm files sized to the viewport.
    """
    context_kwargs: dict = {
        "viewport": viewport,
        "user_agent": user_agent or DEFAULT_USER_AGENT,
        "locale": "en-US",
    }
    if extra_headers:
        context_kwargs["extra_http_headers"] = dict(extra_headers)
    if record_video_dir:
        context_kwargs["record_video_dir"] = record_video_dir
        context_kwargs["record_video_size"] = viewport

    context = await browser.new_context(**context_kwargs)
    await context.add_init_script(_INIT_SCRIPT)
    return context
