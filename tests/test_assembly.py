from __future__ import annotations

from datetime import datetime, timezone

from toyblog.assembly import render_index_page, render_post_page, serialize_document
from toyblog.content import parse_html

POST_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html><head><title>Blog</title></head><body>"
    "<toyb-nav></toyb-nav><toyb-article></toyb-article>"
    "</body></html>"
)


def test_serialize_prefixes_single_doctype() -> None:
    document = parse_html("<!doctype html>\n<html><body></body></html>")

    html = serialize_document(document)

    assert html == "<!DOCTYPE html><html><body></body></html>"


def test_serialize_adds_doctype_when_template_has_none() -> None:
    assert serialize_document(parse_html("<p>x</p>")) == "<!DOCTYPE html><p>x</p>"


def test_post_page_contains_body_exactly_once(make_post) -> None:
    template = parse_html(POST_TEMPLATE)
    post = make_post("a.html", "A", body="<p>Unique body</p>")

    html = render_post_page(post, [post], template)

    assert html.startswith("<!DOCTYPE html>")
    assert html.count("<!DOCTYPE html>") == 1
    assert html.count('<article class="toyb-article"><p>Unique body</p></article>') == 1
    assert '<a href="./a.html">A</a>' in html


def test_rendering_leaves_template_and_other_pages_untouched(make_post) -> None:
    template = parse_html(POST_TEMPLATE)
    original = str(template)
    first = make_post("first.html", "First", body="<p>one</p>")
    second = make_post("second.html", "Second", body="<p>two</p>")

    first_html = render_post_page(first, [first, second], template)
    second_html = render_post_page(second, [first, second], template)

    assert str(template) == original
    assert "<p>one</p>" in first_html and "<p>two</p>" not in first_html
    assert "<p>two</p>" in second_html and "<p>one</p>" not in second_html
    assert "<title>Second</title>" in second_html


def test_post_page_does_not_consume_post_body(make_post) -> None:
    template = parse_html(POST_TEMPLATE)
    post = make_post("a.html", body="<p>Reusable</p>")

    render_post_page(post, [post], template)

    assert post.body_markup == "<p>Reusable</p>"


def test_index_page_lists_non_draft_posts(make_post) -> None:
    template = parse_html("<html><body><toyb-nav></toyb-nav></body></html>")
    posts = [
        make_post("b.html", "B", date=datetime(2024, 1, 2, tzinfo=timezone.utc)),
        make_post("hidden.html", "Hidden", draft=True),
        make_post("a.html", "A"),
    ]

    html = render_index_page(posts, template)

    assert html == (
        '<!DOCTYPE html><html><body><navigation><ul class="nav">'
        '<li><a href="posts/b.html">B</a></li>'
        '<li><a href="posts/a.html">A</a></li>'
        "</ul></navigation></body></html>"
    )
