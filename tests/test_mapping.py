"""Unit tests for html_to_joomla.mapping."""

from dataclasses import dataclass

import pytest

from html_to_joomla.extraction import extract_comprehensive_content
from html_to_joomla.layout import analyze_layout_structure
from html_to_joomla.mapping import (
    column_width, convert_content_to_element, create_footer_section, create_header_section,
    determine_padding, determine_section_style, extract_background_style,
    organize_content_into_rows,
)
from html_to_joomla.models import (
    AudioItem, ButtonItem, FieldDescriptor, FormItem, HeadingItem, ImageItem,
    LayoutStructure, ListItem, TableItem, TextItem, VideoItem,
)


class TestColumnWidth:

    @pytest.mark.parametrize("count,expected", [(1, "100%"), (2, "50%"), (3, "33.3%"), (4, "25%")])
    def test_lookup(self, count, expected):
        assert column_width(count) == expected


class TestConvertContentToElement:

    def test_heading_style_follows_level(self):
        big = convert_content_to_element(HeadingItem(text="Hi", level=2, tag="h2"))
        small = convert_content_to_element(HeadingItem(text="Hi", level=3, tag="h3"))

        assert big == {
            "type": "heading",
            "props": {"content": "Hi", "heading_element": "h2", "heading_style": "h1", "margin": "default"},
        }
        assert small["props"]["heading_style"] == "default"
        assert "children" not in small

    def test_text(self):
        element = convert_content_to_element(TextItem(text="Body copy"))
        assert element == {"type": "text", "props": {"content": "Body copy", "margin": "default"}}

    def test_image_defaults(self):
        props = convert_content_to_element(ImageItem(src="/a.png"))["props"]

        assert props["image"] == "/a.png"
        assert props["image_alt"] == ""
        assert props["image_width"] == "auto"
        assert props["image_height"] == "auto"

    def test_list(self):
        element = convert_content_to_element(ListItem(items=("One", "Two"), ordered=True))

        assert element["type"] == "list"
        assert element["props"]["list_style"] == "decimal"
        assert element["props"]["content"] == [{"content": "One"}, {"content": "Two"}]
        assert convert_content_to_element(ListItem(items=("x",)))["props"]["list_style"] == "disc"

    def test_button(self):
        props = convert_content_to_element(ButtonItem(text="Go", href="/go", style="outline"))["props"]
        assert (props["content"], props["link"], props["style"]) == ("Go", "/go", "outline")

    def test_form_renders_markup(self):
        element = convert_content_to_element(FormItem(
            action="/send",
            method="post",
            inputs=(
                FieldDescriptor(type="email", name="email", placeholder='Say "hi"', required=True),
                FieldDescriptor(type="text", name="name"),
            ),
        ))
        markup = element["props"]["content"]

        assert element["type"] == "html"
        assert markup.startswith('<form action="/send" method="post">')
        assert 'name="email" placeholder="Say &quot;hi&quot;" required>' in markup
        assert 'name="name" placeholder="">' in markup
        assert markup.endswith("</form>")

    def test_table(self):
        props = convert_content_to_element(TableItem(headers=("A", "B"), rows=(("1", "2"),)))["props"]

        assert props["table_style"] == "striped"
        assert props["content"] == {"head": [["A", "B"]], "body": [["1", "2"]]}

    def test_table_without_headers(self):
        props = convert_content_to_element(TableItem(headers=(), rows=(("1",),)))["props"]
        assert props["content"]["head"] == []

    def test_video_defaults(self):
        element = convert_content_to_element(VideoItem(src="https://v.example/1", tag="iframe"))

        assert element["type"] == "video"
        assert element["props"]["video_width"] == "1920"
        assert element["props"]["video_height"] == "1080"

    def test_audio_passes_markup_through(self):
        element = convert_content_to_element(AudioItem(src="/a.mp3", markup='<audio src="/a.mp3"></audio>'))
        assert element == {"type": "html", "props": {"content": '<audio src="/a.mp3"></audio>', "margin": "default"}}

    def test_unknown_kind_passes_through(self):
        @dataclass
        class Quote:
            text: str
            kind: str = "quote"

        element = convert_content_to_element(Quote(text="Be kind"))
        assert element == {"type": "html", "props": {"content": "Be kind", "margin": "default"}}


TWO_COLUMN_HTML = (
    '<div class="row">'
    '<div class="col-md-6"><h3>A title</h3><p>First column paragraph text.</p></div>'
    '<div class="col-md-6"><h3>B title</h3><p>Second column paragraph text.</p></div>'
    '</div>'
)


class TestOrganizeContentIntoRows:

    def test_structural_mapping(self, soup_from):
        soup = soup_from(TWO_COLUMN_HTML)
        elements = [soup.find("div", class_="row")]
        structure = analyze_layout_structure(elements)

        rows = organize_content_into_rows(extract_comprehensive_content(elements), structure, elements)

        assert len(rows) == 1
        assert rows[0]["gap"] == "large"
        columns = rows[0]["columns"]
        assert [c["props"]["width"] for c in columns] == ["50%", "50%"]
        assert [child["type"] for child in columns[0]["children"]] == ["heading", "text"]
        assert columns[0]["children"][0]["props"]["content"] == "A title"
        assert columns[1]["children"][0]["props"]["content"] == "B title"

    def test_structural_mapping_with_leaf_columns(self, soup_from):
        soup = soup_from(
            '<section id="text" class="grid grid-cols-2">'
            '<p>First column paragraph text.</p><p>Second column paragraph text.</p>'
            '</section>'
            '<section id="media" class="grid grid-cols-2"><img src="/a.png"><img src="/b.png"></section>'
        )

        text_elements = [soup.find(id="text")]
        text_rows = organize_content_into_rows(
            extract_comprehensive_content(text_elements), analyze_layout_structure(text_elements), text_elements)
        media_elements = [soup.find(id="media")]
        media_rows = organize_content_into_rows(
            extract_comprehensive_content(media_elements), analyze_layout_structure(media_elements), media_elements)

        text_columns = text_rows[0]["columns"]
        assert [c["children"][0]["props"]["content"] for c in text_columns] == [
            "First column paragraph text.", "Second column paragraph text.",
        ]
        media_columns = media_rows[0]["columns"]
        assert [c["children"][0]["props"]["image"] for c in media_columns] == ["/a.png", "/b.png"]
        assert all(c["props"]["width"] == "50%" for c in text_columns + media_columns)

    def test_rest_of_group_follows_the_grid(self, soup_from):
        soup = soup_from(
            '<section id="grid" class="grid grid-cols-2">'
            '<div>First card with enough text.</div><div>Second card with enough text.</div>'
            '</section>'
            '<div id="after"><p>Trailing paragraph for the group.</p></div>'
        )
        elements = [soup.find(id="grid"), soup.find(id="after")]

        rows = organize_content_into_rows(
            extract_comprehensive_content(elements), analyze_layout_structure(elements), elements)

        assert len(rows) == 2
        assert len(rows[0]["columns"]) == 2
        trailing = rows[1]["columns"]
        assert len(trailing) == 1
        assert trailing[0]["props"]["width"] == "100%"
        assert trailing[0]["children"] == [
            {"type": "text", "props": {"content": "Trailing paragraph for the group.", "margin": "default"}},
        ]

    def test_chunking_when_children_do_not_line_up(self, soup_from):
        soup = soup_from("<div><p>Only one significant child here.</p></div>")
        elements = [soup.find("div")]
        structure = LayoutStructure(columns=3, layout="multi-column")
        items = [TextItem(text=f"Item {i}") for i in range(4)]

        rows = organize_content_into_rows(items, structure, elements)

        assert [len(row["columns"]) for row in rows] == [3, 1]
        assert [c["props"]["width"] for c in rows[0]["columns"]] == ["33.3%"] * 3
        assert rows[1]["columns"][0]["props"]["width"] == "100%"
        assert rows[1]["columns"][0]["children"][0]["props"]["content"] == "Item 3"
        assert rows[0]["gap"] == "default"

    def test_widths_match_column_count(self, soup_from):
        soup = soup_from("<div></div>")
        structure = LayoutStructure(columns=2, is_grid=True, layout="multi-column")
        items = [TextItem(text=str(i)) for i in range(5)]

        for row in organize_content_into_rows(items, structure, [soup.find("div")]):
            widths = {c["props"]["width"] for c in row["columns"]}
            assert widths == {column_width(len(row["columns"]))}
            assert row["gap"] == "large"

    def test_single_column(self):
        items = [HeadingItem(text="T", level=1, tag="h1"), TextItem(text="Body text")]

        rows = organize_content_into_rows(items, LayoutStructure(), [])

        assert len(rows) == 1
        assert len(rows[0]["columns"]) == 1
        column = rows[0]["columns"][0]
        assert column["props"]["width"] == "100%"
        assert [child["type"] for child in column["children"]] == ["heading", "text"]

    def test_no_items_still_yields_a_column(self):
        rows = organize_content_into_rows([], LayoutStructure(columns=3, layout="multi-column"), [])

        assert len(rows) == 1
        assert rows[0]["columns"][0]["children"] == []


class TestSectionProperties:

    def test_section_style(self, soup_from):
        soup = soup_from("<div id='h' class='hero'>x</div><div id='p'>y</div>")
        hero, plain = soup.find(id="h"), soup.find(id="p")

        assert determine_section_style([hero], 3) == "primary"
        assert determine_section_style([plain], 0) == "default"
        assert determine_section_style([plain], 1) == "default"
        assert determine_section_style([plain], 2) == "muted"

    def test_padding(self, soup_from):
        soup = soup_from(
            f"<div id='long'><p>{'word ' * 120}</p></div>"
            "<div id='media'><img src='1'><img src='2'><video></video></div>"
            "<div id='small'><p>Short.</p><img src='1'></div>"
        )

        assert determine_padding([soup.find(id="long")]) == "large"
        assert determine_padding([soup.find(id="media")]) == "large"
        assert determine_padding([soup.find(id="small")]) == "default"

    def test_background(self, soup_from):
        soup = soup_from("<div id='a' class='bg-dark'>x</div><div id='b'>y</div>")

        assert extract_background_style([soup.find(id="b"), soup.find(id="a")]) == "dark"
        assert extract_background_style([soup.find(id="b")]) == "default"


class TestHeaderFooterSections:

    def test_header_section_lists_nav_links(self, soup_from):
        soup = soup_from('<header><a href="/x">Logo</a><nav><a href="/">Home</a><a>Blog</a></nav></header>')

        section = create_header_section(soup.find("header"))

        assert section["type"] == "section"
        nav = section["children"][0]["children"][0]["children"][0]
        assert nav["type"] == "nav"
        assert nav["props"]["items"] == [{"text": "Home", "href": "/"}, {"text": "Blog", "href": "#"}]

    def test_footer_section(self, soup_from):
        soup = soup_from('<footer><p>© 2024 Acme</p><a href="/privacy">Privacy</a></footer>')

        section = create_footer_section(soup.find("footer"))

        column = section["children"][0]["children"][0]
        assert section["props"]["style"] == "secondary"
        assert column["children"][0]["props"]["content"] == "© 2024 Acme Privacy"
        assert column["children"][1]["props"]["items"] == [{"text": "Privacy", "href": "/privacy"}]

    def test_footer_without_links_has_only_text(self, soup_from):
        soup = soup_from("<footer>© 2024</footer>")

        column = create_footer_section(soup.find("footer"))["children"][0]["children"][0]

        assert len(column["children"]) == 1
