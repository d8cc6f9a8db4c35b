# httpc

httpc is a small blocking HTTP/1.1 server. You register a handler function
for a method and an exact route. For each connection the server reads the
request, calls the handler that matches, and sends back the response that
the handler built.

## Installation

```
pip install .
```

## Usage

```python
from httpc.request import Method
from httpc.server import HTTPServer


def hello(response):
    response.set_header("content-type", "text/plain")
    response.set_body(b"Hello, world!")


def index(response):
    try:
        response.set_body_from_file("index.html", "text/html")
    except OSError:
        response.status_code = 500


def not_found(response):
    response.status_code = 404
    response.set_body(b"Nothing here.")


with HTTPServer() as server:
    server.register_handler("/hello", Method.GET, hello)
    server.register_handler("/", Method.GET, index)
    server.register_invalid_route_handler(not_found)
    server.start(8080)  # blocks until server.close() is called
```

`HTTPServer.start(port)` listens on all interfaces at `port` and serves
connections one at a time until `close()` is called, for example from another
thread. While it runs, `server.address` holds the bound address. Passing port
`0` lets the system pick a free port, which you can then read from
`server.address`. `close()` also removes every registered handler. Using the
server as a context manager calls `close()` on exit.

## Routing

The `httpc.request.Method` enum has four members: `GET`, `POST`, `PUT` and
`HEAD`. A handler matches only when the request's method and path are both
exactly the same as the ones it was registered with. There are no patterns
and no prefix matching. If two handlers are registered for the same method and
route, the one registered later is used.

The server uses the invalid-route handler when no handler matches. If no
invalid-route handler is registered, it replies with a bare `404`.

## Handlers

A handler takes one argument, an `httpc.response.Response`. Its
`status_code` starts at 200.

- `set_header(key, value)` adds a header. In the output, headers appear in
  the reverse of the order in which they were added.
- `set_body(body)` sets the body to a copy of the bytes you pass.
- `set_body_from_file(filepath, content_type)` reads the file into the body
  and sets the `content-type` header. It raises `OSError` if the file cannot
  be read.
- `serialize()` returns the bytes sent to the client. The status line holds
  only the last three digits of `status_code`.

## Without sockets

`HTTPServer.handle_message(message)` takes the raw bytes of a request and
returns the raw bytes of the reply. It raises `ValueError` for an empty
message. It is useful in tests:

```python
raw = server.handle_message(b"GET /hello HTTP/1.1\r\n\r\n")
```

`httpc.request.parse_request(data)` returns a `Request` that holds the
method and route of a raw message. `method` is `None` for an unknown method.
`httpc.handler.find_matching_handler(request, handlers)` returns the first
`Handler` that matches, or `None` if none does.

## What it does not do

- Handlers receive only the `Response`. They cannot see the request's
  headers, body or query string.
- Only the request line is parsed. Request headers and bodies are read and
  then ignored.
- Each connection carries one request and is closed after the reply. There
  is no keep-alive.
- Connections are served one after another on the calling thread. There is
  no concurrency.
- No `Content-Length` header is added automatically. There is no TLS and no
  command-line program.

## Running the tests

```
pip install .[test]
pytest
```