"""Shared HTML fixtures for the audit test-suite."""

from __future__ import annotations

import pytest

BASE_URL = "https://example.com/espresso-guide"

_ARTICLE_TEXT = " ".join(["The cat sat on the mat."] * 80)

FULL_HTML = f"""\
<!DOCTYPE html>
<html lang="en">
<head>
  <title>How to Choose a Home Espresso Machine</title>
  <meta name="description" content="Learn how to pick, set up, and maintain a home espresso machine, with answers to the most common questions from new baristas.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://example.com/espresso-guide">
  <meta property="og:title" content="Espresso guide">
  <script type="application/ld+json">{{"@context": "https://schema.org", "@type": "FAQPage", "mainEntity": []}}</script>
  <script type="application/ld+json">[{{"@type": "Article", "headline": "Espresso"}}, {{"@type": "BreadcrumbList"}}, {{"@type": "HowTo"}}]</script>
</head>
<body>
  <header>
    <nav>
      <a href="/">Home</a>
      <a href="/about">About</a>
      <a href="/contact">Contact</a>
    </nav>
  </header>
  <h1>Home Espresso Machines</h1>
  <p class="byline">By Jane Doe. Last updated <time datetime="2024-05-01">May 1, 2024</time>.</p>
  <h2>What is a portafilter?</h2>
  <p>{_ARTICLE_TEXT}</p>
  <h3>How do I descale my machine?</h3>
  <h2>Customer Reviews</h2>
  <img src="a.jpg" alt="Espresso machine">
  <img src="b.jpg" alt="Coffee grinder">
  <p>
    <a href="/beans">Beans</a>
    <a href="/grinders">Grinders</a>
    <a href="/milk">Milk</a>
    <a href="/cleaning">Cleaning</a>
    <a href="/recipes">Recipes</a>
    <a href="https://www.sca.coffee/research">Source: SCA research</a>
  </p>
</body>
</html>
"""

# Title is exactly 20 characters; body holds exactly 100 words.
THIN_HTML = "\n".join(
    [
        "<html>",
        "<head><title>Widget Buying Basics</title></head>",
        "<body>",
        "<h1>Widget</h1>",
        "<p>" + " ".join(["alpha"] * 96) + "</p>",
        '<a href="/a">one</a>',
        '<a href="/b">two</a>',
        '<a href="/c">three</a>',
        "</body>",
        "</html>",
    ]
)
THIN_BASE_URL = "https://shop.example.com/widget"

READER_MODE_HTML = "<body><p>" + " ".join(["Plain reader text."] * 20) + "</p></body>"


@pytest.fixture()
def full_html() -> str:
    return FULL_HTML


@pytest.fixture()
def thin_html() -> str:
    return THIN_HTML


@pytest.fixture()
def reader_mode_html() -> str:
    return READER_MODE_HTML
