"""Prompt templates for the external generation tool."""

PART_MARKER = "(this is part of a longer transcript)"


def _title_line(label: str, title: str, is_multi_part: bool) -> str:
    if is_multi_part:
        return f"{label}: {title} {PART_MARKER}"
    return f"{label}: {title}"


def build_prompt(title: str, transcript_chunk: str, is_multi_part: bool) -> str:
    """Build the prompt for one chunk of a single video's transcript."""
    title_line = _title_line("Video Title", title, is_multi_part)

    return f"""You are a professional blog writer. Convert the following YouTube video transcript into a well-structured, engaging blog post section.

{title_line}

Requirements:
- Use clear, professional tone
- Format in Markdown with proper headings (##, ###)
- Include code examples if mentioned in transcript
- Break content into digestible sections
- Add emphasis using **bold** and *italic* where appropriate
- Do NOT include the video title as an H1 heading (it will be added separately)

Transcript:
{transcript_chunk}

Generate only the blog content, no preamble or explanation:"""


def build_multi_video_prompt(
    title: str, transcript_chunk: str, is_multi_part: bool, video_count: int
) -> str:
    """Build the prompt for one chunk of a combined multi-video transcript."""
    title_line = _title_line("Blog Title", title, is_multi_part)

    return f"""You are a professional blog writer. Convert the following combined transcript from {video_count} YouTube videos into a cohesive, well-structured, comprehensive blog post section.

{title_line}

Requirements:
- Synthesize information from all videos into a unified narrative
- Use clear, professional tone
- Format in Markdown with proper headings (##, ###)
- Include code examples if mentioned in transcripts
- Break content into digestible sections
- Add emphasis using **bold** and *italic* where appropriate
- Reference different videos when relevant (e.g., "As shown in Video 1...")
- Do NOT include the blog title as an H1 heading (it will be added separately)
- Create a comprehensive guide that flows naturally

Combined Transcript:
{transcript_chunk}

Generate only the blog content, no preamble or explanation:"""
