# docpages/markdown/postprocessors/__init__.py

from .github_headings import github_headings
from .table_of_contents import table_of_contents

POSTPROCESSORS = [
    github_headings,  # Move GitHub's heading anchors into the headings
    table_of_contents,  # Anchor headings, build the outline, wrap topics
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
