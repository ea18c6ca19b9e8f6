"""HTML bodies for comment notifications."""

from opinion.domain.value import ArticleId, Nickname

COMMENT_NOTIFICATION_TITLE = "A comment was left under the article"
MENTION_NOTIFICATION_TITLE = "You were mentioned in a comment"

COMMENT_TEMPLATE = (
    '<p>User <a href="[[user_url]]">[[nickname]]</a> left a comment under your '
    '<a href="[[article_url]]">article</a>.'
    "<br>Follow the link to read it.</p>"
)
MENTION_TEMPLATE = (
    '<p>User <a href="[[user_url]]">[[nickname]]</a> mentioned you in a comment '
    'under an <a href="[[article_url]]">article</a>.'
    "<br>Follow the link to read it.</p>"
)


def user_url(base_url: str, nickname: Nickname) -> str:
    return f"{base_url.rstrip('/')}/user/{nickname.root}"


def article_url(base_url: str, article_id: ArticleId) -> str:
    return f"{base_url.rstrip('/')}/article/{article_id}"


def render(
    template: str, base_url: str, commenter: Nickname, article_id: ArticleId
) -> str:
    """Fill the three placeholders of a notification template.

    Args:
        template: One of COMMENT_TEMPLATE / MENTION_TEMPLATE
        base_url: Public base URL of the site, e.g. http://localhost:8000
        commenter: Nickname of the user who wrote the comment
        article_id: Article the comment was left under

    Returns:
        HTML body
    """
    return (
        template.replace("[[user_url]]", user_url(base_url, commenter))
        .replace("[[nickname]]", commenter.root)
        .replace("[[article_url]]", article_url(base_url, article_id))
    )
