from itertools import groupby

from solong.animation import FRAME_LENGTH, INT_MAX, TREE_FRAMES, TreeAnimation, moves_label


def _run(ticks):
    animation = TreeAnimation()
    return [animation.tick() for _ in range(ticks)]


def test_first_tick():
    animation = TreeAnimation()
    assert animation.tick() == 0
    assert animation.anim == 1


def test_frame_advances_every_frame_length_ticks():
    animation = TreeAnimation()
    for _ in range(FRAME_LENGTH):
        animation.tick()
    assert animation.frame == 1


def test_tick_returns_frame():
    animation = TreeAnimation()
    for _ in range(5000):
        assert animation.tick() == animation.frame


def test_frames_stay_in_range_and_all_appear():
    frames = _run(50000)
    assert set(frames) == set(range(TREE_FRAMES))


def test_dog_visits_every_second_cycle():
    sequence = [frame for frame, _ in groupby(_run(50000))]
    assert sequence[:12] == [0, 1, 2, 6, 0, 1, 2, 3, 4, 5, 6, 0]


def test_first_cycle_skips_dog():
    frames = _run(50000)
    assert frames.index(TREE_FRAMES - 1) < frames.index(3)


def test_moves_label():
    assert moves_label(0) == "Movements:0"
    assert moves_label(42) == "Movements:42"


def test_moves_label_overflow():
    assert moves_label(INT_MAX) == "MAX"
    assert moves_label(INT_MAX + 5) == "MAX"
    assert moves_label(-1) == "MAX"
    assert moves_label(INT_MAX - 1) == "Movements:" + str(INT_MAX - 1)