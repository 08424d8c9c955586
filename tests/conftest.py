"""Shared fixtures for converter tests."""

import pytest

from html_to_joomla.dom import parse_html


SCENARIO_HTML = (
    '<header><nav><a href="/">Home</a></nav></header>'
    '<main><section><h1>Welcome</h1>'
    '<p>This is a long enough paragraph to qualify as significant content.</p>'
    '</section></main>'
    '<footer>© 2024</footer>'
)


LANDING_PAGE_HTML = """
<html>
  <head>
    <title>Acme Widgets</title>
    <style>.hero { background: url('/img/hero.jpg'); }</style>
    <link rel="stylesheet" href="/css/site.css">
  </head>
  <body>
    <header class="site-header">
      <nav>
        <a href="/">Home</a>
        <a href="/about">About</a>
        <a class="btn btn-primary" href="/signup">Sign up</a>
      </nav>
    </header>
    <div class="hero">
      <h1>Widgets for every workshop</h1>
      <p>Acme builds durable widgets for makers, tinkerers and factories.</p>
      <a class="btn btn-primary" href="/shop">Shop now</a>
    </div>
    <section class="features grid grid-cols-3">
      <div class="card"><h3>Durable</h3><p>Forged steel that outlasts the competition.</p></div>
      <div class="card"><h3>Precise</h3><p>Tolerances measured in microns, every time.</p></div>
      <div class="card"><h3>Affordable</h3><p>Priced for hobbyists and big shops alike.</p></div>
    </section>
    <section class="pricing">
      <h2>Pricing</h2>
      <table>
        <thead><tr><th>Plan</th><th>Price</th></tr></thead>
        <tbody><tr><td>Basic</td><td>$10</td></tr><tr><td>Pro</td><td>$25</td></tr></tbody>
      </table>
      <ol><li>Pick a plan</li><li>Check out</li></ol>
    </section>
    <section class="contact">
      <h2>Contact us</h2>
      <form action="/contact" method="post">
        <input type="email" name="email" placeholder="Email" required>
        <textarea name="message" placeholder="Message"></textarea>
      </form>
      <iframe src="https://www.youtube.com/embed/abc123" width="560" height="315"></iframe>
    </section>
    <footer class="footer">
      <p>© 2024 Acme Widgets</p>
      <a href="/privacy">Privacy</a>
    </footer>
  </body>
</html>
"""


@pytest.fixture
def scenario_html():
    return SCENARIO_HTML


@pytest.fixture
def landing_page_html():
    return LANDING_PAGE_HTML


@pytest.fixture
def soup_from():
    """Parse an HTML snippet."""
    return parse_html


def _walk_elements(node):
    yield node
    for child in node.get("children", []):
        yield from _walk_elements(child)


@pytest.fixture
def walk():
    """Iterate a builder node and every node below it."""
    return _walk_elements
