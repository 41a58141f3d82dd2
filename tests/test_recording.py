import pytest

from gitness import (
    GestureConfig,
    GestureCounter,
    MotionSample,
    RecordingError,
    estimate_sample_rate,
    load_recording,
    resample,
    write_recording,
)


def test_jsonl_round_trip_replays_same_count(tmp_path, cycle):
    path = tmp_path / "raw.jsonl"
    write_recording(path, cycle())
    samples = load_recording(path)
    assert samples == cycle()

    counter = GestureCounter(GestureConfig())
    for s in samples:
        counter.ingest(s)
    assert counter.count == 1


def test_load_csv(tmp_path):
    path = tmp_path / "set.csv"
    path.write_text(
        "t,rot_y,grav_x,grav_y,grav_z\n"
        "0.0,0.1,0.2,0.3,0.4\n"
        "\n"
        "0.5,-1.0,0.0,-0.9,0.1\n"
    )
    samples = load_recording(path)
    assert samples == [
        MotionSample(0.0, 0.1, 0.2, 0.3, 0.4),
        MotionSample(0.5, -1.0, 0.0, -0.9, 0.1),
    ]


def test_jsonl_skips_blank_lines(tmp_path):
    path = tmp_path / "raw.jsonl"
    path.write_text(
        '{"t": 0, "rot_y": 0, "grav_x": 0, "grav_y": 0, "grav_z": 0}\n\n'
    )
    assert len(load_recording(path)) == 1


@pytest.mark.parametrize("content, message", [
    ('{"t": 0, "rot_y": 0, "grav_x": 0, "grav_y": 0}\n', "grav_z"),
    ('{"t": 0, "rot_y": "x", "grav_x": 0, "grav_y": 0, "grav_z": 0}\n', "non-numeric"),
    ('not json\n', "invalid JSON"),
    ('[1, 2]\n', "expected an object"),
])
def test_bad_jsonl_names_the_line(tmp_path, content, message):
    path = tmp_path / "raw.jsonl"
    path.write_text('{"t": 0, "rot_y": 0, "grav_x": 0, "grav_y": 0, "grav_z": 0}\n' + content)
    with pytest.raises(RecordingError) as exc:
        load_recording(path)
    assert "line 2" in str(exc.value)
    assert message in str(exc.value)


def test_unknown_extension(tmp_path):
    path = tmp_path / "raw.txt"
    path.write_text("")
    with pytest.raises(RecordingError):
        load_recording(path)


def test_estimate_sample_rate(cycle):
    assert estimate_sample_rate(cycle()) == pytest.approx(60.0)
    assert estimate_sample_rate(cycle()[:1]) is None


def test_resample_linear():
    samples = [
        MotionSample(0.0, 0.0, 0.0, 0.0, 0.0),
        MotionSample(0.5, 1.0, 2.0, 3.0, 4.0),
        MotionSample(1.0, 0.0, 0.0, 0.0, 0.0),
    ]
    out = resample(samples, target_hz=4.0)
    assert [s.timestamp for s in out] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert out[1].rotation_y == pytest.approx(0.5)
    assert out[1].gravity_z == pytest.approx(2.0)
    assert out[2] == samples[1]


def test_resample_degenerate_input():
    one = [MotionSample(1.0, 0.0, 0.0, 0.0, 0.0)]
    assert resample(one, 60.0) == one
    same_t = one * 2
    assert resample(same_t, 60.0) == same_t
