import pytest

from ideabank import Session


class FakeCursor:
    """Stands in for a psycopg cursor returning dict rows."""

    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1
        self.closed = False
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.closed = True

    def execute(self, query, params=None):
        self.conn.executed.append((query, params))
        if self.conn.execute_error is not None:
            if self.conn.drop_on_error:
                self.conn.closed = True
            raise self.conn.execute_error
        self._rows = list(self.conn.rows)
        self.rowcount = self.conn.rowcount if self.conn.rowcount is not None else len(self._rows)

    def __iter__(self):
        return iter(self._rows)


class FakeConnection:
    def __init__(self, rows=None, rowcount=None, execute_error=None, close_error=None,
                 drop_on_error=False):
        self.rows = rows or []
        self.rowcount = rowcount
        self.execute_error = execute_error
        self.close_error = close_error
        self.drop_on_error = drop_on_error
        self.closed = False
        self.executed = []
        self.cursors = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        cur = FakeCursor(self)
        self.cursors.append(cur)
        return cur

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


class FakeConnect:
    """Callable replacing psycopg.connect; records every attempt."""

    def __init__(self, connection=None, error=None):
        self.connection = connection or FakeConnection()
        self.error = error
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        self.connection.closed = False
        return self.connection


@pytest.fixture
def config_file(tmp_path):
    config = tmp_path / "dbprops.txt"
    config.write_text(
        "HOST=localhost\n"
        "DATABASE=empresa\n"
        "USER=gustavo\n"
        "PASSWORD=secret\n"
    )
    return config


@pytest.fixture
def fake_connection():
    return FakeConnection()


@pytest.fixture
def fake_connect(fake_connection):
    return FakeConnect(fake_connection)


@pytest.fixture
def session(config_file, fake_connect):
    return Session(config_path=config_file, verbose=True, connect_fn=fake_connect)
