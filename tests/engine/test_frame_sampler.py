import pytest

from engine.frame_sampler import FrameSampler, frame_range
from models.errors import InvalidSpecificationError
from models.value_spec import KeyframePair


def test_sample_rows_follow_request_order():
    sampler = FrameSampler({
        "opacity": ([0, 20], [0, 1]),
        "offset": KeyframePair((0, 20), (16, 0)),
        "blur": 0,
    })

    rows = sampler.sample([20, 0, 5, 5])

    assert sampler.columns == ["frame", "opacity", "offset", "blur"]
    assert [row["frame"] for row in rows] == [20, 0, 5, 5]
    assert rows[0] == {"frame": 20, "opacity": 1, "offset": 0, "blur": 0}
    assert rows[2] == {"frame": 5, "opacity": 0.25, "offset": 12, "blur": 0}
    assert rows[2] == rows[3]


def test_sampling_twice_gives_identical_rows():
    sampler = FrameSampler({"x": ([0, 10, 10, 30], [0, 5, 10, 0])})
    frames = list(range(-5, 40, 3))
    assert sampler.sample(frames) == sampler.sample(reversed(frames))[::-1]


def test_invalid_specs_fail_at_construction():
    with pytest.raises(InvalidSpecificationError):
        FrameSampler({"x": ([0, 10, 5], [0, 1, 2])})


def test_frame_column_is_reserved():
    with pytest.raises(InvalidSpecificationError):
        FrameSampler({"frame": 1})


@pytest.mark.parametrize("text, expected", [
    ("0:40:5", range(0, 40, 5)),
    ("10:20", range(10, 20)),
    ("12", range(12, 13)),
    ("30:0:-10", range(30, 0, -10)),
])
def test_frame_range(text, expected):
    assert frame_range(text) == expected


@pytest.mark.parametrize("text", ["", "a:b", "0:10:0", "1:2:3:4"])
def test_frame_range_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        frame_range(text)
