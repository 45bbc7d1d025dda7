"""Tests for free-text news article extraction."""

from voterblock.data import NewsArticle
from voterblock.news.extractor import extract_articles

NUMBERED_RESPONSE = """\
Here are recent news articles about Jane Doe:

1. "Jane Doe Unveils Infrastructure Plan"
   - **URL:** ([apnews.com](https://apnews.com/article/jane-doe-plan?utm_source=openai))
   - **Publication Date:** March 3, 2025
   - **Source:** Associated Press
   - **Summary:** Senator Doe introduced a bill to fund bridge repairs
     across the state.

2. "Doe Wins Committee Vote"
   - **URL:** ([reuters.com](https://www.reuters.com/world/us/doe-vote?utm_source=openai))
   - **Publication Date:** March 1, 2025
   - **Source:** Reuters
   - **Summary:** The committee advanced the measure 12-9.

3. "Town Hall Draws Crowd"
   - **URL:** ([latimes.com](https://www.latimes.com/politics/town-hall))
   - **Publication Date:** February 27, 2025
   - **Source:** Los Angeles Times
   - **Summary:** Hundreds attended the Fresno town hall.

## Recent Developments
- [Jane Doe Unveils Infrastructure Plan](https://apnews.com/article/jane-doe-plan?utm_source=openai)
"""


def test_numbered_entries_parsed_in_order() -> None:
    articles = extract_articles(NUMBERED_RESPONSE)

    assert [a.title for a in articles] == [
        "Jane Doe Unveils Infrastructure Plan",
        "Doe Wins Committee Vote",
        "Town Hall Draws Crowd",
    ]
    assert all(isinstance(a, NewsArticle) for a in articles)


def test_numbered_entry_fields_are_isolated() -> None:
    first = extract_articles(NUMBERED_RESPONSE)[0]

    assert first.url == "https://apnews.com/article/jane-doe-plan"
    assert first.date == "March 3, 2025"
    assert first.source == "Associated Press"
    assert first.snippet == (
        "Senator Doe introduced a bill to fund bridge repairs\n     across the state."
    )


def test_last_entry_does_not_swallow_recent_developments_fields() -> None:
    last = extract_articles(NUMBERED_RESPONSE)[2]

    assert last.url == "https://www.latimes.com/politics/town-hall"
    assert last.snippet == "Hundreds attended the Fresno town hall."


def test_three_entries_skip_link_harvesting() -> None:
    # The Recent Developments link duplicates entry 1 anyway; nothing extra appears.
    assert len(extract_articles(NUMBERED_RESPONSE)) == 3


def test_tracking_params_are_stripped() -> None:
    for article in extract_articles(NUMBERED_RESPONSE):
        assert "?" not in article.url


def test_bold_ordinal_and_title_markers() -> None:
    content = (
        '**1.** **"Budget Passes Senate"**\n'
        "Source: The Hill\n"
        "Publication Date: June 2, 2025\n"
    )
    articles = extract_articles(content)

    assert len(articles) == 1
    assert articles[0].title == "Budget Passes Senate"
    assert articles[0].source == "The Hill"
    assert articles[0].date == "June 2, 2025"


def test_bare_url_fallback() -> None:
    content = '1. "Doe Tours Flood Zone"\nSee the story (www.example.org/flood-tour?ref=feed) today.\n'
    articles = extract_articles(content)

    assert articles[0].url == "www.example.org/flood-tour"


def test_labeled_url_preferred_over_prose_parenthetical() -> None:
    content = (
        '1. "Doe Speaks"\n'
        "Doe (the senior senator) spoke on the floor.\n"
        "URL: ([cnn.com](https://cnn.com/doe-speaks))\n"
    )
    articles = extract_articles(content)

    assert articles[0].url == "https://cnn.com/doe-speaks"


def test_entry_without_fields_has_empty_optionals() -> None:
    content = '1. "Doe Comments On Vote" She said little else.'
    articles = extract_articles(content)

    assert articles == [NewsArticle(title="Doe Comments On Vote")]


def test_entry_with_empty_body_is_discarded() -> None:
    content = '1. "Only A Title"'
    assert extract_articles(content) == []


def test_title_truncates_at_first_closing_quote() -> None:
    content = '1. "Doe Says "No Deal" On Budget"\nSource: Politico\n'
    articles = extract_articles(content)

    assert articles[0].title == "Doe Says"
    assert articles[0].source == "Politico"


def test_fallback_harvests_recent_developments_links() -> None:
    content = """\
1. "Doe Backs Transit Bill"
   Source: KQED

2. "Doe Meets Mayors"
   Source: SF Chronicle

## Recent Developments
- [Doe Backs Transit Bill](https://www.kqed.org/news/transit?utm_source=x)
- [Doe Announces Reelection Bid](https://www.sfchronicle.com/politics/bid?utm_source=x)
- [Doe Criticizes Budget Cuts](https://politico.com/news/doe-cuts)
- [Doe Hosts Veterans Forum](https://www.kcra.com/article/forum)
"""
    articles = extract_articles(content)

    assert [a.title for a in articles] == [
        "Doe Backs Transit Bill",
        "Doe Meets Mayors",
        "Doe Announces Reelection Bid",
        "Doe Criticizes Budget Cuts",
        "Doe Hosts Veterans Forum",
    ]
    harvested = articles[2]
    assert harvested.url == "https://www.sfchronicle.com/politics/bid"
    assert harvested.source == "sfchronicle.com"
    assert harvested.date == ""
    assert harvested.snippet == ""
    assert articles[3].source == "politico.com"


def test_fallback_skips_repeated_link_titles() -> None:
    content = """\
## Recent Developments
- [Doe Wins Primary](https://a.com/one)
- [Doe Wins Primary](https://b.com/two)
"""
    articles = extract_articles(content)

    assert len(articles) == 1
    assert articles[0].url == "https://a.com/one"


def test_fallback_link_without_host_has_empty_source() -> None:
    content = "## Recent Developments\n[Local Update](/news/local-update?id=4)\n"
    articles = extract_articles(content)

    assert articles == [NewsArticle(title="Local Update", url="/news/local-update")]


def test_no_recognizable_structure_returns_empty() -> None:
    assert extract_articles("I couldn't find any recent news on that person.") == []
    assert extract_articles("") == []
