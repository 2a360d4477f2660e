import pytest

from cpblobs.xmldocument import ROOT_NODE, XmlDocument

CONFIG = (
    "<screensaver>\n"
    "  <fov>45</fov>\n"
    "  <showcube>true</showcube>\n"
    "  <blob1>0.5 0.5 0.5 0.25 2 4 0</blob1>\n"
    "</screensaver>\n"
)


def _all_tags(doc):
    tags = []
    node = doc.next_node(ROOT_NODE)
    while node is not None:
        tags.append(doc.node_tag(node))
        node = doc.next_node(node)
    return tags


def test_first_node_is_root_tag():
    doc = XmlDocument(CONFIG)
    node = doc.next_node(ROOT_NODE)
    assert node == 1
    assert doc.node_tag(node) == "screensaver"


def test_walk_visits_tags_in_order():
    doc = XmlDocument(CONFIG)
    assert _all_tags(doc) == [
        "screensaver",
        "fov",
        "/fov",
        "showcube",
        "/showcube",
        "blob1",
        "/blob1",
        "/screensaver",
    ]


def test_child_node_and_text():
    doc = XmlDocument(CONFIG)
    root = doc.next_node(ROOT_NODE)
    fov = doc.child_node(root, "fov")
    assert doc.node_tag(fov) == "fov"
    assert doc.node_text(fov) == "45"
    assert doc.node_text(doc.child_node(root, "blob1")) == "0.5 0.5 0.5 0.25 2 4 0"


def test_child_node_is_case_insensitive():
    doc = XmlDocument(CONFIG)
    root = doc.next_node(ROOT_NODE)
    assert doc.child_node(root, "SHOWCUBE") == doc.child_node(root, "showcube")
    assert doc.node_text(doc.child_node(root, "ShowCube")) == "true"


def test_child_node_missing_returns_none():
    doc = XmlDocument(CONFIG)
    root = doc.next_node(ROOT_NODE)
    assert doc.child_node(root, "aspectratio") is None


def test_child_node_stops_at_parent_closing_tag():
    doc = XmlDocument("<a><b>1</b></a><c>2</c>")
    a = doc.next_node(ROOT_NODE)
    assert doc.child_node(a, "b") is not None
    assert doc.child_node(a, "c") is None


def test_child_node_without_tag_raises():
    doc = XmlDocument("<abc")
    with pytest.raises(ValueError):
        doc.child_node(1, "x")


def test_tag_with_attributes():
    doc = XmlDocument('<blob1 x="1">7</blob1>')
    node = doc.next_node(ROOT_NODE)
    assert doc.node_tag(node) == "blob1"
    assert doc.node_text(node) == "7"


def test_text_skips_leading_blanks():
    doc = XmlDocument("<fov>\n\t 45</fov>")
    assert doc.node_text(doc.next_node(ROOT_NODE)) == "45"


def test_text_skips_nested_elements():
    doc = XmlDocument("<a><b>x</b>tail</a>")
    assert doc.node_text(doc.next_node(ROOT_NODE)) == "tail"


def test_text_missing_returns_none():
    doc = XmlDocument("<a></a>")
    assert doc.node_text(doc.next_node(ROOT_NODE)) is None


def test_no_tags():
    doc = XmlDocument("plain text only")
    assert doc.next_node(ROOT_NODE) is None
    assert doc.node_count("anything") == 0


def test_unterminated_tag():
    doc = XmlDocument("<abc")
    assert doc.next_node(ROOT_NODE) is None
    assert doc.node_tag(1) is None


def test_node_count_and_iter_nodes():
    doc = XmlDocument("<item>1</item><ITEM>2</ITEM><other>3</other>")
    assert doc.node_count("item") == 2
    assert [doc.node_text(n) for n in doc.iter_nodes("item")] == ["1", "2"]
    assert [doc.node_text(n) for n in doc.iter_nodes("other")] == ["3"]


def test_load_round_trip(tmp_path):
    path = tmp_path / "config.xml"
    path.write_text(CONFIG)
    loaded = XmlDocument.load(path)
    assert loaded.text == CONFIG
    assert _all_tags(loaded) == _all_tags(XmlDocument(CONFIG))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        XmlDocument.load(tmp_path / "absent.xml")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.xml"
    path.write_bytes(b"")
    with pytest.raises(ValueError):
        XmlDocument.load(path)