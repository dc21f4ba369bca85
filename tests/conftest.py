from collections.abc import Callable

import httpx
import pytest

from preview_api.services.metadata import FetchPolicy, MetadataService


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_service() -> Callable[..., MetadataService]:
    """Build a MetadataService whose requests are answered by ``handler``."""

    def factory(handler: Handler, **policy_overrides) -> MetadataService:
        return MetadataService(
            FetchPolicy(**policy_overrides),
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def article_html() -> str:
    return """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Fallback title</title>
  <meta property="og:title" content="Tom &amp; Jerry">
  <meta content="A cat &quot;and&quot; a mouse" property="og:description">
  <meta property="og:image" content="/img/x.png">
  <meta property="og:site_name" content="Example News">
  <link rel="icon" href="//cdn.ex.com/f.ico">
</head>
<body><p>Hello</p></body>
</html>"""
