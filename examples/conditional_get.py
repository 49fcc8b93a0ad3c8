# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "notmodified",
# ]
#
# [tool.uv.sources]
# notmodified = { path = "../", editable = true }
# ///

import logging

import anyio

from notmodified import AsyncEtagger, Headers, Request, Response
from notmodified._utils import make_async_iterator

logging.basicConfig(level=logging.DEBUG)


def render_page() -> Response:
    return Response(
        status_code=200,
        headers=Headers({"Content-Type": "text/html"}),
        stream=make_async_iterator([b"<html>", b"<body>Hello</body>", b"</html>"]),
    )


async def main() -> None:
    etagger = AsyncEtagger()

    first = await etagger.handle(Request(method="GET"), render_page())
    etag = first.headers["ETag"]
    print(first.status_code, dict(first.headers), await first.aread())

    # The browser revalidates with the ETag it received.
    second = await etagger.handle(Request(method="GET", headers=Headers({"If-None-Match": etag})), render_page())
    print(second.status_code, second.status_text, dict(second.headers))


if __name__ == "__main__":
    anyio.run(main)
