#!/usr/bin/env python3
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
"""
Tests for the pocket_tags command line tool.
"""
import unittest
import json
import tempfile
import shutil
from unittest.mock import patch, MagicMock
from io import StringIO

from config import PocketSettings
from errors import RemoteError
from models import TagSummary
from pocket_tags import main, sort_tags, summarize_tags


class TestSortTags(unittest.TestCase):
    def setUp(self):
        self.tags = [
            TagSummary(tag="web", item_count=1),
            TagSummary(tag="python", item_count=3),
            TagSummary(tag="ai", item_count=1),
        ]

    def test_sort_by_count(self):
        result = sort_tags(self.tags, "count")
        self.assertEqual([t.tag for t in result], ["python", "ai", "web"])

    def test_sort_by_name(self):
        result = sort_tags(self.tags, "name")
        self.assertEqual([t.tag for t in result], ["ai", "python", "web"])


@patch("pocket_tags.logger")
@patch("pocket_tags.create_client")
@patch("pocket_tags.load_settings")
class TestSummarizeTags(unittest.TestCase):
    """Test cases for the summarize_tags workflow."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.settings = PocketSettings(consumer_key="key", access_token="token")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_prints_tags(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = self.settings
        mock_client = MagicMock()
        mock_client.get_tags_with_article_count.return_value = [
            TagSummary(tag="web", item_count=1),
            TagSummary(tag="python", item_count=2),
        ]
        mock_create.return_value = mock_client

        with patch("sys.stdout", new_callable=StringIO) as stdout:
            status = summarize_tags()

        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue(), "python\t2\nweb\t1\n")
        mock_client.get_tags_with_article_count.assert_called_once_with("token")

    def test_access_token_argument_wins(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = self.settings
        mock_client = MagicMock()
        mock_client.get_tags_with_article_count.return_value = []
        mock_create.return_value = mock_client

        status = summarize_tags(access_token="other-token")

        self.assertEqual(status, 0)
        mock_client.get_tags_with_article_count.assert_called_once_with("other-token")

    def test_writes_output_file(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = self.settings
        mock_client = MagicMock()
        mock_client.get_tags_with_article_count.return_value = [
            TagSummary(tag="python", item_count=2),
        ]
        mock_create.return_value = mock_client
        out_path = os.path.join(self.test_dir, "tags.json")

        with patch("sys.stdout", new_callable=StringIO):
            status = summarize_tags(output=out_path)

        self.assertEqual(status, 0)
        with open(out_path, "r", encoding="utf-8") as f:
            self.assertEqual(json.load(f), [{"tag": "python", "item_count": 2}])

    def test_missing_credentials(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = PocketSettings()

        status = summarize_tags()

        self.assertEqual(status, 1)
        mock_create.assert_not_called()
        mock_logger.error.assert_called()

    def test_blank_access_token(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = PocketSettings(consumer_key="key", access_token="   ")

        status = summarize_tags()

        self.assertEqual(status, 1)
        mock_create.assert_not_called()

    def test_access_token_argument_fills_missing_setting(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = PocketSettings(consumer_key="key")
        mock_client = MagicMock()
        mock_client.get_tags_with_article_count.return_value = []
        mock_create.return_value = mock_client

        status = summarize_tags(access_token="cli-token")

        self.assertEqual(status, 0)
        self.assertEqual(mock_create.call_args[0][0].access_token, "cli-token")

    def test_remote_error(self, mock_load, mock_create, mock_logger):
        mock_load.return_value = self.settings
        mock_client = MagicMock()
        mock_client.get_tags_with_article_count.side_effect = RemoteError("Invalid token")
        mock_create.return_value = mock_client

        status = summarize_tags()

        self.assertEqual(status, 1)
        mock_logger.error.assert_called()


class TestMain(unittest.TestCase):
    @patch("pocket_tags.summarize_tags")
    def test_main_passes_arguments(self, mock_summarize):
        mock_summarize.return_value = 0

        with self.assertRaises(SystemExit) as ctx:
            main(["--access-token", "tok", "--output", "out.json", "--sort", "name"])

        self.assertEqual(ctx.exception.code, 0)
        mock_summarize.assert_called_once_with(access_token="tok", output="out.json", order="name")

    @patch("pocket_tags.summarize_tags")
    def test_main_exit_status(self, mock_summarize):
        mock_summarize.return_value = 1

        with self.assertRaises(SystemExit) as ctx:
            main([])

        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
