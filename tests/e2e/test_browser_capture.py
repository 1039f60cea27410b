"""
End-to-End Tests for Browser Capture
====================================

Drive a real headless Chromium against the ephemeral server. Skipped when
Playwright's Chromium cannot be launched in this environment.
"""

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright

from static_prerender.core.rendering.markup_corrector import correct_markup
from static_prerender.core.rendering.prerenderer import Prerenderer
from static_prerender.core.server.ephemeral import serve_directory

PAGE = """<!doctype html>
<html>
<head><link rel="stylesheet" href="app.css"></head>
<body>
  <input id="width" type="number">
  <div id="mode"></div>
  <script>
    document.getElementById("width").value = "42";
    document.getElementById("mode").textContent =
      location.search === "?prerender" ? "prerender" : "live";
    requestAnimationFrame(() => {
      const s = document.createElement("script");
      s.src = "./chunk-3f2a1b.js";
      s.async = true;
      document.head.appendChild(s);
    });
  </script>
</body>
</html>
"""


@pytest_asyncio.fixture
async def chromium_available():
    playwright = await async_playwright().start()
    try:
        browser = await playwright.chromium.launch(headless=True)
    except Exception as e:
        await playwright.stop()
        pytest.skip(f"Chromium unavailable: {e}")
    await browser.close()
    await playwright.stop()


@pytest.fixture
def site(tmp_path):
    root = tmp_path / "dist"
    root.mkdir()
    (root / "index.html").write_text(PAGE, encoding="utf-8")
    (root / "app.css").write_text("body{margin:0}", encoding="utf-8")
    (root / "chunk-3f2a1b.js").write_text("window.loaded = true;", encoding="utf-8")
    return root


@pytest.mark.e2e
class TestBrowserCapture:
    """Capture a served page with a real browser."""

    @pytest.mark.asyncio
    async def test_live_input_value_becomes_attribute(self, chromium_available, site):
        async with serve_directory(site) as server:
            markup = await Prerenderer(settle_ms=200).capture(server.url + "?prerender")

        assert markup.startswith("<!doctype html><html>")
        assert 'value="42"' in markup
        assert '<div id="mode">prerender</div>' in markup

    @pytest.mark.asyncio
    async def test_captured_markup_is_made_portable(self, chromium_available, site):
        async with serve_directory(site) as server:
            markup = await Prerenderer(settle_ms=200).capture(server.url + "?prerender")
            port = server.port

        corrected = correct_markup(markup, port)

        assert f"localhost:{port}" not in corrected
        assert "chunk-3f2a1b" not in corrected
        assert 'href="app.css"' in corrected
