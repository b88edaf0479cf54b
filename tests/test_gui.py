from dinorunner.gui import HOVER_FILL, NORMAL_FILL, Button, create_buttons


def test_labels():
    b = create_buttons(800, 600)
    assert [b.start.label, b.pause.label, b.restart.label, b.exit.label] == [
        "START GAME",
        "PAUSE",
        "RESTART",
        "EXIT",
    ]


def test_start_button_centred():
    b = create_buttons(800, 600)
    assert b.start.contains(400, 300)
    assert b.start.x + b.start.width / 2 == 400


def test_bar_buttons_do_not_overlap():
    b = create_buttons(800, 600)
    assert not b.pause.rect.intersects(b.restart.rect)
    assert b.pause.contains(10, 10)


def test_start_and_exit_disjoint():
    b = create_buttons(800, 600)
    assert not b.start.rect.intersects(b.exit.rect)


def test_hover_changes_fill():
    button = Button("X", 0, 0, 10, 10)
    assert button.update_hover(5, 5)
    assert button.fill == HOVER_FILL
    assert not button.update_hover(50, 50)
    assert button.fill == NORMAL_FILL


def test_click_requires_press_and_inside():
    button = Button("X", 0, 0, 10, 10)
    assert button.is_clicked(5, 5, True)
    assert not button.is_clicked(5, 5, False)
    assert not button.is_clicked(10, 5, True)