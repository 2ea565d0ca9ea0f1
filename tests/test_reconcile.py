#!/usr/bin/env python3
"""
Unit tests for reconciling the store with Hyprland
"""

import unittest
from unittest.mock import MagicMock, Mock

from minhypr.reconcile import Reconciler, reconcile

from helpers import FakeNotifier, FakeWindowManager, make_record

HIDDEN = "special:minimized"


class TestReconcile(unittest.TestCase):
    """Test the pure filter"""

    def setUp(self):
        self.windows = [make_record("0x1"), make_record("0x2"), make_record("0x3")]

    def test_consistent_store_is_unchanged(self):
        addresses = {"0x1", "0x2", "0x3"}
        kept, changed = reconcile(self.windows, addresses | {"0x9"}, addresses)
        self.assertEqual(kept, self.windows)
        self.assertFalse(changed)

    def test_closed_window_is_dropped(self):
        kept, changed = reconcile(self.windows, {"0x1", "0x3"}, {"0x1", "0x2", "0x3"})
        self.assertEqual([w.address for w in kept], ["0x1", "0x3"])
        self.assertTrue(changed)

    def test_window_outside_hidden_workspace_is_dropped(self):
        kept, changed = reconcile(self.windows, {"0x1", "0x2", "0x3"}, {"0x2"})
        self.assertEqual([w.address for w in kept], ["0x2"])
        self.assertTrue(changed)

    def test_missing_snapshot_keeps_everything(self):
        for open_addresses, hidden in ((None, {"0x1"}), ({"0x1"}, None), (None, None)):
            kept, changed = reconcile(self.windows, open_addresses, hidden)
            self.assertEqual(kept, self.windows)
            self.assertFalse(changed)


class TestReconciler(unittest.TestCase):
    """Test passes against a store and window manager"""

    def setUp(self):
        self.windows = [make_record("0x1"), make_record("0x2")]
        self.store = Mock()
        self.store.load.return_value = list(self.windows)
        self.wm = FakeWindowManager()
        self.wm.clients = {"0x1": HIDDEN, "0x2": HIDDEN}
        self.notifier = FakeNotifier()
        self.reconciler = Reconciler(self.store, self.wm, self.notifier, HIDDEN)

    def test_idempotent_pass(self):
        self.assertEqual(self.reconciler.run(), self.windows)
        self.assertEqual(self.reconciler.run(), self.windows)
        self.store.save.assert_not_called()
        self.assertEqual(self.notifier.count, 0)

    def test_stale_entries_are_saved_and_notified_once(self):
        del self.wm.clients["0x1"]
        self.wm.clients["0x2"] = "1"
        self.assertEqual(self.reconciler.run(), [])
        self.store.save.assert_called_once_with([])
        self.assertEqual(self.notifier.count, 1)

    def test_query_failure_is_fail_safe(self):
        self.wm.queries_fail = True
        self.assertEqual(self.reconciler.run(), self.windows)
        self.store.save.assert_not_called()
        self.assertEqual(self.notifier.count, 0)

    def test_uses_given_windows(self):
        kept = self.reconciler.run([make_record("0x2"), make_record("0x7")])
        self.assertEqual([w.address for w in kept], ["0x2"])
        self.store.load.assert_not_called()

    def test_empty_store_skips_queries(self):
        self.store.load.return_value = []
        self.assertEqual(self.reconciler.run(), [])
        self.assertEqual(self.wm.queries, 0)

    def test_holds_lock_during_pass(self):
        lock = MagicMock()
        reconciler = Reconciler(self.store, self.wm, self.notifier, HIDDEN, lock=lock)
        reconciler.run()
        lock.__enter__.assert_called_once()
        lock.__exit__.assert_called_once()


if __name__ == '__main__':
    unittest.main()
