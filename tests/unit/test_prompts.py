"""Unit tests for tubeblog.services.prompts."""

from tubeblog.services.prompts import PART_MARKER, build_multi_video_prompt, build_prompt


class TestBuildPrompt:
    def test_single_part(self) -> None:
        prompt = build_prompt("Decorators 101", "some transcript words", False)

        assert "Video Title: Decorators 101\n" in prompt
        assert PART_MARKER not in prompt
        assert "Transcript:\nsome transcript words\n" in prompt
        assert prompt.endswith("Generate only the blog content, no preamble or explanation:")

    def test_multi_part_marks_the_title(self) -> None:
        prompt = build_prompt("Decorators 101", "chunk", True)
        assert f"Video Title: Decorators 101 {PART_MARKER}" in prompt

    def test_forbids_title_heading(self) -> None:
        prompt = build_prompt("T", "chunk", False)
        assert "Do NOT include the video title as an H1 heading" in prompt
        assert "Format in Markdown with proper headings (##, ###)" in prompt


class TestBuildMultiVideoPrompt:
    def test_mentions_video_count_and_synthesis(self) -> None:
        prompt = build_multi_video_prompt("Complete Guide to Python", "combined", False, 3)

        assert "combined transcript from 3 YouTube videos" in prompt
        assert "Blog Title: Complete Guide to Python\n" in prompt
        assert "Synthesize information from all videos into a unified narrative" in prompt
        assert "Combined Transcript:\ncombined\n" in prompt
        assert PART_MARKER not in prompt

    def test_multi_part(self) -> None:
        prompt = build_multi_video_prompt("Guide", "combined", True, 2)
        assert f"Blog Title: Guide {PART_MARKER}" in prompt
