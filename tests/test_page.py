import pytest

from favlink.core.styles import build_css
from favlink.runtime.page import ContentPage


@pytest.mark.asyncio
async def test_page_with_link_gets_stylesheet() -> None:
    page = ContentPage('<p>Visit [favlink url="https://openai.com"]</p>')
    html = await page.render()

    assert '<p>Visit <a href="https://openai.com" class="favlink"' in html
    style = f'<style id="favlink-style-inline-css">{build_css()}</style>'
    assert style in html
    assert html.index(style) < html.index("</head>")
    assert html.count("<style") == 1
    assert page.context.needs_css is True


@pytest.mark.asyncio
async def test_many_links_one_stylesheet() -> None:
    content = '[favlink url="https://a.com"] [favlink url="https://b.com" size="16"]'
    html = await ContentPage(content).render()
    assert html.count('class="favlink"') == 2
    assert html.count("<style") == 1


@pytest.mark.asyncio
async def test_page_without_links_has_no_stylesheet() -> None:
    html = await ContentPage("<p>Nothing to see</p>").render()
    assert "<style" not in html


@pytest.mark.asyncio
async def test_invalid_link_adds_no_stylesheet() -> None:
    page = ContentPage('<p>[favlink url="not a url"]</p>')
    html = await page.render()
    assert "<p></p>" in html
    assert "<style" not in html
    assert page.context.needs_css is False


@pytest.mark.asyncio
async def test_editor_canvas() -> None:
    page = ContentPage('<p class="has-large-font-size">[favlink url="https://a.com"]</p>', editor=True)
    html = await page.render()

    assert '<div class="editor-styles-wrapper"><p class="has-large-font-size"><a href="https://a.com"' in html
    assert f'<style id="favlink-editor-style-inline-css">{build_css(True)}</style>' in html
    assert "favlink-style-inline-css" not in html


@pytest.mark.asyncio
async def test_title_is_escaped() -> None:
    html = await ContentPage("", title="<Home>").render()
    assert "<title>&lt;Home&gt;</title>" in html


def test_transform_phase() -> None:
    page = ContentPage('[favlink url="https://a.com"]')
    assert page.transform().startswith('<a href="https://a.com"')
    assert page.context.needs_css is True
    assert page.styles.render() == ""
    page.enqueue_assets()
    assert page.styles.is_enqueued("favlink-style")
