from hidebars.core.geometry import (
    BarEdge,
    BarMotionSynchronizer,
    FrameBar,
    FrameViewport,
    companion_offset,
    is_bar_visible,
)
from hidebars.core.state import BarRole, VisibilitySettings


def make_sync(**settings_kwargs):
    settings = VisibilitySettings(**settings_kwargs)
    top = FrameBar(offset=0, thickness=40, edge=BarEdge.NEAR)
    bottom = FrameBar(offset=560, thickness=40)
    sync = BarMotionSynchronizer(
        settings,
        FrameViewport(width=300, height=600),
        {BarRole.PRIMARY: top, BarRole.SECONDARY: bottom},
        animation_duration=0.5,
    )
    return sync, top, bottom


def test_visibility_depends_on_docked_edge():
    viewport = FrameViewport(width=300, height=600)
    assert is_bar_visible(FrameBar(offset=560, thickness=40), viewport)
    assert not is_bar_visible(FrameBar(offset=600, thickness=40), viewport)
    assert is_bar_visible(FrameBar(offset=0, thickness=40, edge=BarEdge.NEAR), viewport)
    assert not is_bar_visible(FrameBar(offset=-40, thickness=40, edge=BarEdge.NEAR), viewport)


def test_far_bar_slides_down_to_hide_and_up_to_show():
    sync, _, bottom = make_sync()

    sync.apply(BarRole.SECONDARY, hidden=True, animated=True)
    assert bottom.moves == [(600, 0.5)]

    sync.apply(BarRole.SECONDARY, hidden=False, animated=False)
    assert bottom.moves[-1] == (560, 0.0)


def test_near_bar_slides_up_to_hide():
    sync, top, _ = make_sync()

    sync.apply(BarRole.PRIMARY, hidden=True, animated=False)
    assert top.offset == -40

    sync.apply(BarRole.PRIMARY, hidden=False, animated=False)
    assert top.offset == 0


def test_bar_already_in_place_is_not_moved():
    sync, top, bottom = make_sync()

    sync.apply(BarRole.PRIMARY, hidden=False, animated=True)
    sync.apply(BarRole.SECONDARY, hidden=False, animated=True)

    assert top.moves == []
    assert bottom.moves == []


def test_companion_repositioned_even_when_bar_stays():
    companion = FrameBar(offset=0, thickness=30)
    sync, _, _ = make_sync(companion=companion, companion_gap=5.0)

    sync.apply(BarRole.SECONDARY, hidden=False, animated=False)

    assert companion.offset == 560 - 5 - 30


def test_companion_only_tracks_its_own_bar():
    companion = FrameBar(offset=0, thickness=30)
    sync, _, _ = make_sync(companion=companion, companion_bar=BarRole.SECONDARY)

    sync.apply(BarRole.PRIMARY, hidden=True, animated=False)

    assert companion.moves == []


def test_companion_below_near_bar():
    bar = FrameBar(offset=-40, thickness=40, edge=BarEdge.NEAR)
    companion = FrameBar(offset=0, thickness=30)
    assert companion_offset(bar, companion, 5.0) == 5.0


def test_missing_bar_is_ignored():
    settings = VisibilitySettings()
    sync = BarMotionSynchronizer(settings, FrameViewport(width=300, height=600), {BarRole.PRIMARY: None})

    sync.apply(BarRole.PRIMARY, hidden=True, animated=True)
    sync.apply(BarRole.SECONDARY, hidden=True, animated=True)


def test_reseat_companion_leaves_bar_alone():
    companion = FrameBar(offset=0, thickness=60)
    sync, _, bottom = make_sync(companion=companion, companion_gap=5.0)

    sync.reseat_companion(BarRole.SECONDARY)
    sync.reseat_companion(BarRole.PRIMARY)

    assert bottom.moves == []
    assert companion.moves == [(560 - 5 - 60, 0.0)]
