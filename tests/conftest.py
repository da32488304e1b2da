import pytest


def make_widget(widget_id, name=None, kind="widget", **extra):
    item = {"id": widget_id, "embeddableType": kind, "embeddableId": widget_id}
    if name is not None:
        item["name"] = name
    item.update(extra)
    return item


@pytest.fixture
def widgets():
    return [make_widget(i, f"Widget {i}") for i in range(1, 26)]
