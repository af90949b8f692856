"""Plain text rendering of an issue and its discussion."""

from ..github_client.models import GitHubComment, GitHubIssue

ISSUE_RULE = "=" * 60
HEADER_RULE = "-" * 60
COMMENT_RULE = "-" * 20
NO_BODY = "*(No body)*"


def _render_body(body: str | None) -> str:
    text = (body or "").rstrip("\n")
    return text or NO_BODY


def format_issue(issue: GitHubIssue, comments: list[GitHubComment]) -> str:
    """Render one issue block of the report.

    Args:
        issue: Issue metadata
        comments: Comment thread in source order

    Returns:
        The block text, ending with the blank lines that separate issues
    """
    lines = [
        ISSUE_RULE,
        f"Issue #{issue.number}: {issue.title}",
        HEADER_RULE,
        f"State: {issue.state}",
        f"Author: {issue.author_login}",
        f"Created At: {issue.created_at}",
        f"URL: {issue.url}",
        HEADER_RULE,
        "",
        "### Issue Body ###",
        "",
        _render_body(issue.body),
        "",
        f"### Discussion ({len(comments)} comments) ###",
    ]

    for comment in comments:
        lines.extend(
            [
                "",
                COMMENT_RULE,
                f"Comment by {comment.author_login} at {comment.created_at}:",
                "",
                _render_body(comment.body),
            ]
        )

    lines.extend(["", ISSUE_RULE, "", ""])
    return "\n".join(lines) + "\n"
