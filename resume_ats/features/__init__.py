from .bullets import analyze_bullet, analyze_bullets
from .formatting import analyze_formatting
from .keywords import extract_keywords, get_keyword_category, match_keywords
from .section_quality import analyze_sections, get_section_guidance

__all__ = [
    "extract_keywords",
    "match_keywords",
    "get_keyword_category",
    "analyze_bullet",
    "analyze_bullets",
    "analyze_sections",
    "get_section_guidance",
    "analyze_formatting",
]
