# siegekit

Building blocks for an HTTP load tester, written in pure Python. It uses
only the standard library.

## Modules

- `siegekit.date`
  - `strtotime(text)` parses HTTP dates (RFC 1123, RFC 850, asctime,
    `YYYYMMDD`, numeric `+hhmm` zones and named zones such as `GMT` or
    `PST`) into seconds since the epoch. It returns `0` for an empty
    string and `-1` for one it cannot parse.
  - `date_adjust(tvalue, secs)` moves a timestamp by a number of seconds.
  - `Date(text)` holds a parsed date, or the current time when `text` is
    `None`. `Date.from_etag(etag)` holds an entity tag instead.
  - A `Date` offers `rfc850()`, `expired()`, `to_string()` and `stamp()`,
    the last a bracketed prefix for log lines.
- `siegekit.evaluate`
  - `evaluate(variables, buf, environ=None)` replaces the first `$NAME`,
    `${NAME}` or `$(NAME)` in `buf`.
  - The name is looked up in `variables` first and then in the
    environment. An unknown name is dropped.
  - It raises `ValueError` when `buf` holds no `$`.
- `siegekit.cookie`
  - `parse_cookie(text, host)` turns the value of a `Set-Cookie` header
    into a `Cookie` dataclass. When no domain is given, the domain is
    taken from `host`.
  - `parse_time(text)` parses cookie expiry dates and delta seconds.
  - A `Cookie` offers `to_string()`, `expires_string()`, `reset_value()`
    and `clone()`.
- `siegekit.cookies`
  - `CookieJar(path=None)` keeps cookies per owner. The owner defaults to
    the calling thread's identifier.
  - `add()` stores a cookie and replaces one of the same name.
  - `delete()` and `delete_all()` remove cookies. `header(host)` builds
    the `Cookie:` request line. `listing()` dumps the jar.
  - `save()` writes the unexpired persistent cookies to the file. `load()`
    reads them back as a dict of owner number to cookie strings.
  - `close()`, and leaving a `with` block, save the jar and then empty it.
  - The default file is `~/.siege/cookies.txt`.
- `siegekit.creds`
  - `parse_credentials(scheme, text)` reads `username:password[:realm]`
    into `Credentials`. The realm defaults to `any`.
  - `Scheme` lists `HTTP`, `HTTPS`, `FTP`, `PROXY` and `UNSUPPORTED`.
- `siegekit.cache`
  - `Cache` remembers ETags, Last-Modified dates and Expires dates for
    each request. It stores no content.
  - `header(ctype, request)` returns an `If-None-Match` or
    `If-Modified-Since` line while the entry is fresh.
  - The kinds of entry are the members of `CacheType`: `ETAG`, `LAST`
    and `EXPIRES`.
- `siegekit.data`
  - `Data` accumulates counts, bytes, failures and transaction times.
  - It reports `availability()`, `response_time()`, `transaction_rate()`,
    `throughput()`, `concurrency()`, `megabytes()` and `lowest()`.
  - The rates are based on the last call to `elapsed()`.
- `siegekit.crew`
  - `Crew(size, maxsize, block=True)` is a pool of worker threads fed
    from a bounded queue.
  - `add()` waits when the queue is full, or refuses the work when
    `block` is false.
  - `join(finish=True)` drains the queue and stops the workers.
    `cancel()` stops them at once.
- `siegekit.cfg`
  - `read_cfg_file(filename)` reads a URL file.
    - It skips comments and blank lines.
    - It takes `NAME=value` lines as variables and expands `$NAME` in the
      lines that follow.
    - It raises `OSError` when the file cannot be opened.
  - `read_cmd_line(url)` returns the command-line URL as a list of four
    entries.
  - `parse_line()` and `is_variable_line()` are the helpers behind both.
- `siegekit.ring`
  - `RingArray` is a list whose `next()` and `prev()` cycle through the
    items without end.
  - `str()` renders it as `[a],[b],...`, or `NULL` when it is empty.

## Example

```python
from siegekit.cookies import CookieJar
from siegekit.creds import Scheme, parse_credentials
from siegekit.data import Data

with CookieJar("cookies.txt") as jar:
    jar.add("session=token; path=/", "www.example.com", owner=1)
    print(jar.header("www.example.com", owner=1))   # 'Cookie: session=token\r\n'

password = "password"
creds = parse_credentials(Scheme.HTTP, f"user:{password}:admin")
print(creds.username, creds.realm)                  # user admin

stats = Data()
stats.start()
stats.add_count(10)
stats.add_total(2.5)
stats.stop()
print(stats.response_time(), stats.availability())  # 0.25 100.0
```

## What it does not do

The package sends no HTTP or FTP requests and opens no sockets. It has no
command-line program. It does not drive simulated users or print a
summary at the end of a run. It supplies the pieces such a tool needs: a
cookie jar, a validator cache, a statistics collector, URL-file reading
and a worker pool. The code that does the networking and reporting is
left to you.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.