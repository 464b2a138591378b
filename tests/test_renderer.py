"""End-to-end tests for render_page."""

from bs4 import BeautifulSoup

from docpages.markdown.generators import render_local
from docpages.markdown.outline import Heading
from docpages.markdown.renderer import render_markdown, render_page
from docpages.markdown.postprocessors import utils
from docpages.markdown.postprocessors.table_of_contents import table_of_contents
from tests.test_table_of_contents import GITHUB_WRAPPED


class TestRenderPage:
    def test_outline_order(self, failing_remote) -> None:
        page = render_page("# A\n\n## B\n\n## C\n\n# D\n", client=failing_remote)
        assert [(h.id, h.level) for h in page.outline] == [("a", 1), ("b", 2), ("c", 2), ("d", 1)]

    def test_local_fallback_is_reported(self, failing_remote) -> None:
        markdown = "# Intro\n\nx\n"
        page = render_page(markdown, client=failing_remote)

        assert page.generator == "local"
        assert page.html == table_of_contents(render_local(markdown), {})

    def test_remote_html_is_postprocessed(self, remote_html) -> None:
        client = remote_html(
            '<h1><a name="user-content-intro" class="anchor" href="#intro"></a>Intro</h1>\n'
            "<p>x</p>\n"
        )
        page = render_page("# Intro\n\nx\n", client=client)

        assert page.generator == "remote"
        assert list(page.outline) == [Heading(id="intro", level=1, text="Intro")]
        soup = BeautifulSoup(page.html, "html.parser")
        topic = soup.find("div", class_="topic")
        assert topic.h1.a["name"] == "intro"
        assert topic.p.get_text() == "x"

    def test_containers_from_markdown(self, failing_remote) -> None:
        page = render_page(
            "# Intro\n\nx\n\n## Sub\n\ny\n\n# Next\n", client=failing_remote
        )
        soup = BeautifulSoup(page.html, "html.parser")

        topics = soup.find_all("div", class_="topic", recursive=False)
        assert [t.h1.get_text() for t in topics] == ["Intro", "Next"]
        assert topics[0].p.get_text() == "x"
        assert topics[1].find("p") is None

        sub_topic = soup.find("div", class_="sub-topic")
        assert sub_topic.h2.get_text() == "Sub"
        assert sub_topic.p.get_text() == "y"

    def test_context_receives_generator_and_outline(self, failing_remote) -> None:
        context = {}
        page = render_page("## Only\n", context=context, client=failing_remote)
        assert context["generator"] == "local"
        assert context["outline"] is page.outline

    def test_no_headings(self, failing_remote) -> None:
        page = render_page("just text\n", client=failing_remote)
        assert len(page.outline) == 0
        assert page.html == "<p>just text</p>"

    def test_idempotent_outline(self, failing_remote) -> None:
        page = render_page(
            "# NuGet Docs\n\n## Install It\n\n### On Linux\n\n#\n", client=failing_remote
        )
        again = {}
        table_of_contents(page.html, again)
        assert again["outline"] == page.outline

    def test_render_markdown_returns_html(self) -> None:
        assert render_markdown("# Hi\n") == '<div class="topic"><h1><a name="hi"></a>Hi</h1></div>'

    def test_caller_context_is_filled_in(self, failing_remote) -> None:
        context = {"anchor_prefix": "doc-"}
        render_page('<h2><a name="doc-foo"></a>Foo</h2>\n', context=context, client=failing_remote)
        assert context["outline"][0].id == "foo"
        assert "__shared_soup" not in context
        assert "__shared_soup_source" not in context

    def test_github_markup_is_parsed_once(self, remote_html, monkeypatch) -> None:
        parses = []
        real_soup = utils.BeautifulSoup

        def counting_soup(*args, **kwargs):
            parses.append(args)
            return real_soup(*args, **kwargs)

        monkeypatch.setattr(utils, "BeautifulSoup", counting_soup)
        page = render_page("## Usage Notes\n\nBody\n", client=remote_html(GITHUB_WRAPPED))

        assert page.generator == "remote"
        assert [h.id for h in page.outline] == ["usage-notes"]
        assert len(parses) == 1
