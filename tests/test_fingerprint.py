from __future__ import annotations

from conftest import make_sample

from clip_resizer.fingerprint import Decision, Fingerprint, FingerprintTracker


def test_equal_pixels_give_equal_fingerprints() -> None:
    first = make_sample(20, 10, color=(1, 2, 3, 255))
    second = make_sample(20, 10, color=(1, 2, 3, 255))

    assert first is not second
    assert Fingerprint.of(first) == Fingerprint.of(second)


def test_different_pixels_give_different_fingerprints() -> None:
    red = make_sample(20, 10, color=(255, 0, 0, 255))
    blue = make_sample(20, 10, color=(0, 0, 255, 255))

    assert Fingerprint.of(red) != Fingerprint.of(blue)


def test_same_bytes_with_swapped_dimensions_differ() -> None:
    tall = make_sample(30, 40, color=(7, 7, 7, 255))
    wide = make_sample(40, 30, color=(7, 7, 7, 255))
    tracker = FingerprintTracker()

    assert tall.pixels == wide.pixels
    assert Fingerprint.of(tall) != Fingerprint.of(wide)

    tracker.record(Fingerprint.of(wide))
    assert tracker.observe(Fingerprint.of(tall)) is Decision.NEW


def test_first_observation_is_always_new() -> None:
    tracker = FingerprintTracker()

    assert tracker.last is None
    assert tracker.observe(Fingerprint.of(make_sample(5, 5))) is Decision.NEW


def test_recorded_output_is_an_echo() -> None:
    tracker = FingerprintTracker()
    output = Fingerprint.of(make_sample(5, 5, color=(9, 9, 9, 255)))

    tracker.record(output)

    assert tracker.observe(output) is Decision.ECHO_OF_OWN_OUTPUT
    assert tracker.observe(Fingerprint.of(make_sample(5, 5))) is Decision.NEW


def test_observe_does_not_mutate() -> None:
    tracker = FingerprintTracker()
    candidate = Fingerprint.of(make_sample(8, 8))

    assert tracker.observe(candidate) is Decision.NEW
    assert tracker.observe(candidate) is Decision.NEW
    assert tracker.last is None

    tracker.record(Fingerprint.of(make_sample(3, 3)))
    assert tracker.observe(candidate) is tracker.observe(candidate)
