import json
import tempfile
import unittest

from ledger_pro.config import constants
from ledger_pro.storage.state_store import (
    ClientState,
    Identity,
    StateStore,
    load_client_state,
    save_client_state,
    save_identity,
    save_locks,
)


class StateStoreTests(unittest.TestCase):
    def test_write_read_delete(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            store.write("key-1", {"a": 1})
            self.assertEqual(store.read("key-1"), {"a": 1})
            store.write("key-1", ["updated"])
            self.assertEqual(store.read("key-1"), ["updated"])
            store.delete("key-1")
            self.assertIsNone(store.read("key-1"))

    def test_missing_and_corrupt_files_read_as_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            self.assertIsNone(store.read("absent"))
            store.path("broken").write_text("{not json", encoding="utf-8")
            self.assertIsNone(store.read("broken"))

    def test_rejects_path_like_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            with self.assertRaises(ValueError):
                store.write("../escape", 1)

    def test_value_is_stored_as_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            store.write("ledger_auth", {"username": "ameen"})
            raw = store.path("ledger_auth").read_text(encoding="utf-8")
            self.assertEqual(json.loads(raw), {"username": "ameen"})


class ClientStateTests(unittest.TestCase):
    def test_empty_store_restores_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            state = load_client_state(StateStore(tmp))
        self.assertIsNone(state.identity)
        self.assertEqual(state.locks, {})

    def test_round_trip_identity_and_locks(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            save_client_state(
                store,
                ClientState(identity=Identity("ameen"), locks={"a1": True}),
            )
            state = load_client_state(store)
        self.assertEqual(state.identity, Identity("ameen"))
        self.assertEqual(state.locks, {"a1": True})

    def test_false_lock_entries_are_dropped(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            store.write(
                constants.LOCKED_ACCOUNTS_STATE_KEY, {"a1": True, "a2": False}
            )
            self.assertEqual(load_client_state(store).locks, {"a1": True})
            save_locks(store, {"a3": True, "a4": False})
            self.assertEqual(
                store.read(constants.LOCKED_ACCOUNTS_STATE_KEY), {"a3": True}
            )

    def test_clearing_identity_removes_key(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            save_identity(store, Identity("ameen"))
            save_identity(store, None)
            self.assertIsNone(store.read(constants.AUTH_STATE_KEY))
            self.assertFalse(store.path(constants.AUTH_STATE_KEY).exists())

    def test_malformed_identity_is_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            store = StateStore(tmp)
            store.write(constants.AUTH_STATE_KEY, {"username": "   "})
            self.assertIsNone(load_client_state(store).identity)
            store.write(constants.AUTH_STATE_KEY, None)
            self.assertIsNone(load_client_state(store).identity)


if __name__ == "__main__":
    unittest.main()
