import datetime
from typing import Iterable

from chaiblog.schemas.blog import PostDetail, PostSummary
from chaiblog.services.terminal_renderer import MarkdownRenderer

CYAN = "\x1b[36m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0m"

RULE_WIDTH = 80

BANNER = (
    "        ___\n"
    "       ( _ )_\n"
    "      |  _  _|   ☕ Chai & Blogs\n"
    "      | |_| |\n"
    "       \\___/\n"
)


DAY_NAMES = "Mon Tue Wed Thu Fri Sat Sun".split()
MONTH_NAMES = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()


def format_date(value: datetime.datetime) -> str:
    """Short human date, e.g. ``Mon Jan 15 2024``, independent of the locale."""
    day = DAY_NAMES[value.weekday()]
    month = MONTH_NAMES[value.month - 1]
    return f"{day} {month} {value.day:02d} {value.year}"


def format_listing(posts: Iterable[PostSummary], host: str, blog_url: str) -> str:
    posts = list(posts)

    lines = ["", f"{CYAN}{BANNER}{RESET}"]
    lines.append("=" * RULE_WIDTH)
    lines.append("\t" * 2 + "Articles 📃")
    lines.append("=" * RULE_WIDTH)
    lines.append("")
    lines.append(f"Total Articles: {len(posts)}")
    lines.append("")
    lines.append("-" * RULE_WIDTH)
    lines.append("")

    for index, post in enumerate(posts, start=1):
        lines.append(f"{YELLOW}{index}. {post.title}{RESET}")
        lines.append(f"   Published: {format_date(post.publishedAt)}")
        lines.append(f"   {GREEN}curl {host}/{post.slug}{RESET}")
        lines.append("")

    lines.append("-" * RULE_WIDTH)
    lines.append(f"Blog: {blog_url}")
    lines.append("")
    return "\n".join(lines) + "\n"


def format_post(post: PostDetail, post_url: str, renderer: MarkdownRenderer) -> str:
    header = ["", "=" * RULE_WIDTH, post.title.upper()]
    if post.subtitle:
        header.append(post.subtitle)
    header.append("=" * RULE_WIDTH)
    header.append("")
    header.append(f"Published: {format_date(post.publishedAt)}")
    header.append(f"Tags: {', '.join(post.tags)}")
    header.append("")
    header.append("-" * RULE_WIDTH)
    header.append("")

    footer = ["", "-" * RULE_WIDTH, f"Read online: {post_url}", "", ""]

    return "\n".join(header) + "\n" + renderer.render(post.markdown) + "\n".join(footer)
