# shortlink

The core of a URL shortener: it turns long URLs into short Base62 codes
and resolves those codes back to the original address. Links are kept in
a SQL table named `url`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `shortlink.application`

`URLApplication(repository)` holds the shortening rules on top of any
object that implements `shortlink.repository.URLRepository`.

- `create_short_url(request)` takes a `CreateURLRequest`. A URL that does
  not start with `http://` or `https://` gets `https://` in front of it.
  The URL is stored, its short code is computed from the id the store
  assigned, the record is updated, and a `GetURLResponse` is returned.
  A failure in the store raises `CustomError(ErrorType.INTERNAL)`.
- `get_by_short_url(short_url)` returns the `GetURLResponse` for a code.
  An unknown code raises `CustomError(ErrorType.NOT_FOUND)`; a failure in
  the store raises `CustomError(ErrorType.INTERNAL)`.

`encode_base62(number)` gives the short code for a non-negative integer,
using the digits `0-9`, `A-Z`, `a-z` and left-padding with `0` to at least
five characters. A negative number raises `ValueError`.

```python
>>> from shortlink.application import encode_base62
>>> encode_base62(1)
'00001'
>>> encode_base62(62)
'00010'
```

### `shortlink.repository`

`URLRepository` is the protocol a store implements: `create(entity)`,
`update(entity)` and `get(url_filter)`, the last returning `None` when
nothing matches.

`SQLURLRepository(connection)` implements it over a DB-API connection that
uses the `%s` parameter style (MySQL drivers do). `create` sets the
entity's `id` from the cursor's `lastrowid`, and each write is committed.
`get` adds a condition for every non-empty field of the `URLFilter`.

The table it works with has the columns `id`, `user_id`, `short_url`,
`original_url`, `created_at` and `updated_at`.

### `shortlink.models`

- `URLEntity`: a row of the `url` table.
- `URLFilter`: `id` and `short_url` conditions; zero or empty values are ignored.
- `GetURLResponse`: the public view of a link. `from_entity(entity)` builds
  one, and `to_dict()` gives its JSON form with ISO 8601 times (naive times
  are taken as UTC and written with `Z`); `updated_at` is left out while unset.
- `CreateURLRequest`: `from_dict(data)` builds one from decoded JSON and
  raises `ValueError` when the body is not an object or `original_url` is
  not a string.

### `shortlink.errors`

`CustomError(error_type)` is the exception the application raises. It has
`message`, `code` and `http_status`, all taken from its `ErrorType`:

| `ErrorType`       | Code   | Message               | HTTP status |
|-------------------|--------|-----------------------|-------------|
| `SUCCESSFUL`      | `0000` | `success`             | 200         |
| `INTERNAL`        | `0001` | `error internal`      | 500         |
| `NOT_FOUND`       | `0002` | `data not found`      | 400         |
| `INVALID_REQUEST` | `0003` | `invalid request`     | 400         |
| `UNAUTHORIZE`     | `0004` | `unauthorize request` | 401         |

### `shortlink.config`

`load_config(env_file=".env")` loads the given environment file, without
overriding variables already set, and returns a `Config`. A file that
cannot be loaded only logs a warning; pass `None` to skip it.

| Variable               | Default       | Field                                |
|------------------------|---------------|--------------------------------------|
| `DB_HOST`              | `127.0.0.1`   | `database.host`                      |
| `DB_PORT`              | `3306`        | `database.port`                      |
| `DB_USER`              | `user`        | `database.user`                      |
| `DB_PASSWORD`          | *(empty)*     | `database.password`                  |
| `DB_NAME`              | `tests`       | `database.name`                      |
| `DATABASE_URL`         | see below     | `database.url`                       |
| `DB_MAX_OPEN_CONNS`    | `10`          | `database.max_open_conns`            |
| `DB_MAX_IDLE_CONNS`    | `5`           | `database.max_idle_conns`            |
| `DB_CONN_MAX_LIFETIME` | `3600`        | `database.conn_max_lifetime`, seconds|
| `SERVER_PORT`          | `8080`        | `server.port`                        |
| `SERVER_READ_TIMEOUT`  | `5`           | `server.read_timeout`, seconds       |
| `SERVER_WRITE_TIMEOUT` | `10`          | `server.write_timeout`, seconds      |
| `SERVER_IDLE_TIMEOUT`  | `30`          | `server.idle_timeout`, seconds       |
| `ENV`                  | `development` | `environment`                        |

The default `DATABASE_URL` is
`mysql://root:@tcp(127.0.0.1:3306)/tests?parseTime=true`. An empty
variable counts as unset, and an integer variable that cannot be parsed
falls back to its default with a warning. `get_env(key, fallback)` and
`get_env_as_int(key, fallback)` apply these rules to a single variable.

A `Config` also offers `dsn`, `connect_kwargs` (`host`, `port`, `user`,
`password`, `database`, ready to pass to a MySQL driver's `connect`),
`database_url`, `is_development` and `is_production`.

## Example

```python
from shortlink.application import URLApplication
from shortlink.models import CreateURLRequest


class MemoryRepository:
    def __init__(self):
        self.rows = {}

    def create(self, entity):
        entity.id = len(self.rows) + 1
        self.rows[entity.id] = entity
        return entity

    def update(self, entity):
        self.rows[entity.id] = entity
        return entity

    def get(self, url_filter):
        for entity in self.rows.values():
            if entity.short_url == url_filter.short_url:
                return entity
        return None


app = URLApplication(MemoryRepository())
created = app.create_short_url(CreateURLRequest(original_url="example.com"))
print(created.short_url)        # 00001
print(created.original_url)     # https://example.com
print(app.get_by_short_url("00001").original_url)
```

## What this package does not do

It has no HTTP server and no command to start one: there are no routes,
no redirects and no JSON responses written for you. It does not bundle a
database driver or open connections itself; hand `SQLURLRepository` a
connection you have made, and create the `url` table yourself.