from blogshell.builder import NodeBuilder
from blogshell.dom_model import Node, find_by_id, text_content, walk
from blogshell.fragments import header, navigation
from blogshell.models import DEFAULT_MOTTO, HeaderContent, NavLink


def _tags(node: Node) -> list[str]:
    return [child.tag for child in node.children if isinstance(child, Node)]


def test_header_structure():
    b = NodeBuilder()
    node = header(b, HeaderContent())

    assert node.tag == "header"
    assert _tags(node) == ["h1", "p", "div", "blockquote", "section"]
    assert node.children[0].children == ("The Code Notebook",)
    assert node.children[2].classes == ["divider"]


def test_header_motto_is_single_multiline_text_leaf():
    node = header(NodeBuilder(), HeaderContent())
    motto = node.children[3]
    assert motto.classes == ["motto"]
    assert motto.children == (DEFAULT_MOTTO,)
    assert "\n" in motto.children[0]


def test_header_subscribe_form_fields():
    content = HeaderContent(form_id="signup", container_id="signup-box")
    node = header(NodeBuilder(), content)

    container = find_by_id(node, "signup-box")
    assert container is not None
    form = find_by_id(container, "signup")
    assert form is not None and form.tag == "form"

    inputs = [n for n in walk(form) if n.tag == "input"]
    assert [(i.props["name"], i.props["type"]) for i in inputs] == [("name", "text"), ("email", "text")]
    labels = [n.props["for"] for n in walk(form) if n.tag == "label"]
    assert labels == ["name", "email"]
    buttons = [n for n in walk(form) if n.tag == "button"]
    assert len(buttons) == 1 and buttons[0].props["type"] == "submit"


def test_header_reflects_input_record():
    node = header(NodeBuilder(), HeaderContent(title="Other Blog", subtitle="Notes", motto="one\ntwo"))
    text = text_content(node)
    assert "Other Blog" in text
    assert "Notes" in text
    assert "one\ntwo" in text


def test_navigation_links_in_order():
    links = [NavLink(label="Home", href="/"), NavLink(label="About", href="/about/")]
    node = navigation(NodeBuilder(), links)

    assert node.tag == "nav"
    anchors = [n for n in walk(node) if n.tag == "a"]
    assert [(a.props["href"], a.children) for a in anchors] == [("/", ("Home",)), ("/about/", ("About",))]


def test_navigation_can_be_collected_in_isolation():
    b = NodeBuilder()
    produced = b.collect(lambda: navigation(b, [NavLink(label="Home", href="/")]))
    assert len(produced) == 1
    assert produced[0].tag == "nav"
    assert b.depth == 0


def test_fragments_are_deterministic():
    assert header(NodeBuilder(), HeaderContent()) == header(NodeBuilder(), HeaderContent())
    links = [NavLink(label="Home", href="/")]
    assert navigation(NodeBuilder(), links) == navigation(NodeBuilder(), links)
