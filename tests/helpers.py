"""Shared helpers for the test suite: page builder and fake remote client."""
import threading
from typing import Optional


OPTIONS_SECTION = """
  <div>
    <div><h2 id="options">Options</h2></div>
    <div>
      <ul>
        <li>
          <p>Size</p><p>size</p><p>true</p>
          <ul>
            <li><p>Small</p><p>s</p><p>true</p></li>
            <li><p>Large</p><p>l</p><p>false</p></li>
          </ul>
        </li>
      </ul>
    </div>
  </div>
"""

IMAGES_SECTION = """
  <div>
    <div><h2 id="images">Images</h2></div>
    <div>
      <ul>
        <li><picture><img src="/media/widget-front.jpg" alt=""></picture></li>
        <li><picture><img src="https://cdn.example.com/widget-back.jpg" alt=""></picture></li>
      </ul>
    </div>
  </div>
"""


def build_page(
    sku: Optional[str] = "WID-1",
    name: Optional[str] = "Widget",
    price: Optional[str] = "$19.99",
    description: Optional[str] = "A very useful widget.",
    images: bool = True,
    options: bool = True,
    details: bool = True,
    extra_meta: str = "",
) -> str:
    """Build the HTML of a pre-rendered product page."""
    meta = f'<meta name="sku" content="{sku}">' if sku is not None else ""
    body = []
    if name is not None:
        body.append(f"<div><div><h1>  {name}  </h1></div></div>")
    if images:
        body.append(IMAGES_SECTION)
    if description is not None:
        body.append(
            '<div><div><h2 id="description">Description</h2></div>'
            f"<div><p>  {description}  </p></div></div>"
        )
    if price is not None:
        body.append(
            '<div><div><h2 id="price">Price</h2></div>'
            f"<div>  {price}  </div></div>"
        )
    if options:
        body.append(OPTIONS_SECTION)

    container_class = "product-details" if details else "content"
    return f"""<html>
<head>
  <title>{name}</title>
  {meta}
  <meta name="twitter_title" content="Widget from Twitter">
  <meta property="og:type" content="product">
  {extra_meta}
</head>
<body>
  <main>
    <div class="{container_class}">
      {''.join(body)}
    </div>
  </main>
</body>
</html>"""


class FakeGraphQLClient:
    """Stand-in for GraphQLClient that records fetch_product_price calls."""

    def __init__(self, response=None, error: Optional[Exception] = None, gate=None):
        self.response = response
        self.error = error
        self.gate = gate
        self.calls = []
        self._lock = threading.Lock()

    def fetch_product_price(self, sku):
        with self._lock:
            self.calls.append(sku)
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.error is not None:
            raise self.error
        return self.response


def remote_price(regular: float, final: float, currency: str = "EUR") -> dict:
    """Remote ProductViewPrice with distinct regular and final amounts."""
    return {
        "roles": ["visible"],
        "regular": {"amount": {"currency": currency, "value": regular}},
        "final": {"amount": {"currency": currency, "value": final}},
    }
