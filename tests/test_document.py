"""Tests for parse/document.py."""

from marktally.parse.document import scan_document

DOCUMENT = """# 2024-03 #monthly

- [ ] Draft plan 📅 2024-03-02 #work
- [x] Old task ✅ 2024-03-01

## Evening #life
Some prose that is not a task.

<!-- start -->
分类:: 总结
日期:: 2024-03-02
Walked in the park
<!-- end -->

- [ ] Task after block #work
"""


def test_scan_document_finds_tasks_and_blocks():
    items = scan_document("notes/2024-03.md", DOCUMENT, "notes")
    assert [item["type"] for item in items] == ["task", "task", "block", "task"]
    assert [item["id"] for item in items] == [
        "notes/2024-03.md#3",
        "notes/2024-03.md#4",
        "notes/2024-03.md#9",
        "notes/2024-03.md#15",
    ]


def test_section_tags_and_header_are_inherited():
    items = scan_document("notes/2024-03.md", DOCUMENT, "notes")
    assert items[0]["tags"] == ["monthly", "work"]
    assert items[0]["header"] == "2024-03"
    assert items[2]["tags"] == ["life"]
    assert items[2]["header"] == "Evening"
    assert items[3]["tags"] == ["life", "work"]
    assert all(item["filename"] == "2024-03" for item in items)


def test_block_is_parsed_once():
    items = scan_document("notes/2024-03.md", DOCUMENT, "notes")
    block = items[2]
    assert block["category_key"] == "总结"
    assert block["title"] == "Walked in the park"
    assert block["date"] == "2024-03-02"


def test_unclosed_block_is_ordinary_text():
    text = "<!-- start -->\n分类:: 总结\n- [ ] Still a task"
    items = scan_document("a.md", text, "")
    assert len(items) == 1
    assert items[0]["title"] == "Still a task"


def test_custom_block_markers():
    text = "%%begin%%\n分类:: 计划\nnext week\n%%end%%"
    items = scan_document("a.md", text, "", block_start="%%begin%%", block_end="%%end%%")
    assert len(items) == 1
    assert items[0]["category_key"] == "计划"


def test_empty_document():
    assert scan_document("a.md", "", "") == []
