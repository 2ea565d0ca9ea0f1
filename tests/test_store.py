#!/usr/bin/env python3
"""
Unit tests for the minimized-window store
"""

import json
import os
import unittest

from minhypr.store import WindowStore

from helpers import TempDirMixin, make_record


class TestWindowStore(TempDirMixin, unittest.TestCase):
    """Test loading and saving the state file"""

    def setUp(self):
        self.root = self.make_tempdir()
        self.path = os.path.join(self.root, "windows.json")
        self.store = WindowStore(self.path)

    def write(self, content: str):
        with open(self.path, 'w') as f:
            f.write(content)

    def test_missing_file_is_empty(self):
        self.assertEqual(self.store.load(), [])

    def test_round_trip(self):
        windows = [
            make_record("0x1", 1, "firefox", "Home"),
            make_record("0x2", 3, "kitty", "vim: notes, todo"),
            make_record("0x3", 2, "code", "main.py"),
        ]
        windows[1].preview_path = "/tmp/minhypr-previews/0x2.thumb.png"

        self.store.save(windows)
        self.assertEqual(self.store.load(), windows)

    def test_empty_store_is_valid_json(self):
        self.store.save([])
        with open(self.path) as f:
            self.assertEqual(json.load(f), [])
        self.assertEqual(self.store.load(), [])

    def test_file_format(self):
        self.store.save([make_record("0x1", 5)])
        with open(self.path) as f:
            data = json.load(f)
        self.assertEqual(set(data[0]), {
            "address", "display_label", "class", "original_title",
            "preview_path", "icon", "origin_workspace",
        })
        self.assertEqual(data[0]["origin_workspace"], 5)

    def test_corrupt_file_is_empty(self):
        self.write("{not json")
        self.assertEqual(self.store.load(), [])

    def test_non_list_is_empty(self):
        self.write('{"address": "0x1"}')
        self.assertEqual(self.store.load(), [])

    def test_malformed_records_are_dropped(self):
        good = make_record("0x1").to_dict()
        self.write(json.dumps([good, {"address": "0x2"}, "junk"]))
        windows = self.store.load()
        self.assertEqual([w.address for w in windows], ["0x1"])

    def test_save_does_not_enforce_uniqueness(self):
        self.store.save([make_record("0x1"), make_record("0x1")])
        self.assertEqual(len(self.store.load()), 2)

    def test_save_replaces_without_leftovers(self):
        self.store.save([make_record("0x1")])
        self.store.save([make_record("0x2")])
        self.assertEqual([w.address for w in self.store.load()], ["0x2"])
        self.assertEqual(os.listdir(self.root), ["windows.json"])

    def test_save_into_missing_directory_raises(self):
        store = WindowStore(os.path.join(self.root, "missing", "windows.json"))
        with self.assertRaises(OSError):
            store.save([])

    def test_ensure_exists(self):
        self.store.ensure_exists()
        self.assertTrue(os.path.exists(self.path))
        self.store.save([make_record("0x1")])
        self.store.ensure_exists()
        self.assertEqual(len(self.store.load()), 1)


if __name__ == '__main__':
    unittest.main()
