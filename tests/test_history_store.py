import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from zudora.catalog import Catalog  # noqa: E402
from zudora.session import HistoryEntry, InMemoryHistoryStore, SessionController, SqliteHistoryStore  # noqa: E402


class HistoryStoreContract:
    def make_store(self):
        raise NotImplementedError

    def test_add_list_clear(self):
        store = self.make_store()
        first = HistoryEntry(title="College suggestions for CSE")
        second = HistoryEntry(title="Cutoff marks query")
        store.add(first)
        store.add(second)
        entries = store.entries()
        self.assertEqual([e.id for e in entries], [second.id, first.id])
        self.assertEqual(entries[0].title, "Cutoff marks query")
        self.assertEqual(entries[0].timestamp, second.timestamp)
        store.clear()
        self.assertEqual(store.entries(), [])


class InMemoryHistoryStoreTests(HistoryStoreContract, unittest.TestCase):
    def make_store(self):
        return InMemoryHistoryStore()


class SqliteHistoryStoreTests(HistoryStoreContract, unittest.TestCase):
    def make_store(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        store = SqliteHistoryStore(str(Path(tmp.name) / "nested" / "history.db"))
        self.addCleanup(store.close)
        return store

    def test_entries_survive_reopen(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        db_path = str(Path(tmp.name) / "history.db")

        store = SqliteHistoryStore(db_path)
        store.add(HistoryEntry(title="I scored 185 marks in BC cate..."))
        store.close()

        reopened = SqliteHistoryStore(db_path)
        self.addCleanup(reopened.close)
        self.assertEqual([e.title for e in reopened.entries()], ["I scored 185 marks in BC cate..."])

    def test_controller_close_releases_connection(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        store = SqliteHistoryStore(str(Path(tmp.name) / "history.db"))
        store.add(HistoryEntry(title="Cutoff marks query"))
        controller = SessionController(Catalog(), store)

        controller.close()
        self.assertIsNone(store._conn)
        controller.close()
        self.assertEqual([e.title for e in store.entries()], ["Cutoff marks query"])
        store.close()


if __name__ == "__main__":
    unittest.main()
