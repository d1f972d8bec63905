"""
Tests for natural ordering of frames.
"""
from core.data_structures import FrameInfo, Rect, Size
from core.frame_sequence import FrameSequence, natural_sort_key


def frame(name, source=(32, 32)):
    return FrameInfo(filename=name, frame=Rect(0, 0, 32, 32), source_size=Size(*source))


class TestNaturalSortKey:
    """natural_sort_key compares digit runs numerically."""

    def test_digit_count_does_not_matter(self):
        assert natural_sort_key("frame_9") < natural_sort_key("frame_10")
        assert natural_sort_key("frame_99") < natural_sort_key("frame_100")

    def test_leading_zeros_compare_by_value(self):
        assert natural_sort_key("a_1.png") < natural_sort_key("a_02.png") < natural_sort_key("a_10.png")

    def test_text_is_case_insensitive(self):
        assert natural_sort_key("Walk_1") == natural_sort_key("walk_1")

    def test_multiple_numeric_runs(self):
        names = ["run2_frame10", "run10_frame1", "run2_frame9"]
        assert sorted(names, key=natural_sort_key) == ["run2_frame9", "run2_frame10", "run10_frame1"]

    def test_leading_digits(self):
        assert natural_sort_key("2.png") < natural_sort_key("10.png")


class TestFrameSequence:
    """FrameSequence ordering and lookups."""

    def test_sorted_on_construction(self):
        sequence = FrameSequence([frame("f_10"), frame("f_9"), frame("f_1")])
        assert sequence.names() == ["f_1", "f_9", "f_10"]

    def test_ties_are_deterministic(self):
        first = FrameSequence([frame("a_02"), frame("a_2")]).names()
        second = FrameSequence([frame("a_2"), frame("a_02")]).names()
        assert first == second

    def test_is_immutable_view(self):
        frames = [frame("b"), frame("a")]
        sequence = FrameSequence(frames)
        frames.append(frame("c"))
        assert len(sequence) == 2

    def test_get_out_of_range(self):
        sequence = FrameSequence([frame("a")])
        assert sequence.get(0).filename == "a"
        assert sequence.get(1) is None
        assert sequence.get(-1) is None

    def test_find_prefers_exact_match(self):
        sequence = FrameSequence([frame("idle_1"), frame("idle_10")])
        index, found = sequence.find("idle_1")
        assert index == 0
        assert found.filename == "idle_1"

    def test_max_source_size_is_per_axis(self):
        sequence = FrameSequence([frame("a", (100, 20)), frame("b", (30, 80))])
        assert sequence.max_source_size() == Size(100, 80)
