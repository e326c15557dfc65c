from diagram.core.geometry import Box
from diagram.elements.rectangle import Rectangle
from diagram.layouts.vertical import VStack


def test_result_has_all_four_layers(artboard):
    card = Rectangle(width=100, height=50,
                     box_model={"padding": 4, "border": 1, "margin": 10})
    artboard.add_element(card)
    card.position((20, 20))

    boxes = artboard.layout()[card]
    assert boxes.border == Box(20, 20, 100, 50)
    assert boxes.padding == Box(21, 21, 98, 48)
    assert boxes.content == Box(25, 25, 90, 40)
    assert boxes.margin == Box(10, 10, 120, 70)
    assert boxes.layer("content") == boxes.content


def test_result_covers_whole_tree(artboard):
    stack = VStack()
    items = [Rectangle(width=10, height=10) for _ in range(3)]
    stack.add_elements(*items)
    artboard.add_element(stack)

    result = artboard.layout()
    assert len(result) == 5
    assert all(item in result for item in items)
    assert result.bounds == Box(0, 0, 800, 600)


def test_paint_order_uses_z_index_then_creation(artboard):
    back = Rectangle(width=10, height=10, z_index=-1)
    first = Rectangle(width=10, height=10)
    top = Rectangle(width=10, height=10, z_index=5)
    second = Rectangle(width=10, height=10)
    group = VStack()
    nested = Rectangle(width=5, height=5)
    group.add_element(nested)

    artboard.add_elements(top, first, group, second, back)

    order = artboard.layout().paint_order()
    # Siblings: z_index first, then creation order; children follow their parent
    assert order == [artboard, back, first, second, group, nested, top]
