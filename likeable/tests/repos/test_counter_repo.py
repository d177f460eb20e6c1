from unittest.mock import patch

from django.contrib.contenttypes.models import ContentType
from django.test import TestCase

from likeable.models import LikeCounter
from likeable.repos.counter_repo import LikeCounterRepo
from likeable.repos.like_repo import LikeRepo
from likeable.tests.helpers import counter_rows, make_article, make_book, make_user
from likeable.tests.testapp.models import Article, Book


class LikeCounterRepoTestCase(TestCase):
    def setUp(self):
        self.repo = LikeCounterRepo()
        self.book = make_book()

    def test_get_without_row_is_zero(self):
        self.assertEqual(self.repo.get(self.book), 0)
        self.assertIsNone(self.repo.counter_for(self.book))

    def test_increment_creates_then_adds(self):
        self.repo.increment(self.book)
        self.assertEqual(self.repo.get(self.book), 1)

        self.repo.increment(self.book)
        self.assertEqual(self.repo.get(self.book), 2)
        self.assertEqual(counter_rows(self.book).count(), 1)

    def test_increment_is_per_type(self):
        self.repo.increment(self.book)
        self.repo.increment(self.book, "bookmark")
        self.repo.increment(self.book, "bookmark")

        self.assertEqual(self.repo.get(self.book), 1)
        self.assertEqual(self.repo.get(self.book, "bookmark"), 2)

    def test_increment_falls_back_to_update_after_create_race(self):
        self.repo.increment(self.book)
        real_update = self.repo.update
        calls = []

        def first_update_misses(lookup, **data):
            calls.append(lookup)
            if len(calls) == 1:
                return 0
            return real_update(lookup, **data)

        with patch.object(self.repo, "update", side_effect=first_update_misses):
            self.repo.increment(self.book)

        self.assertEqual(len(calls), 2)
        self.assertEqual(self.repo.get(self.book), 2)

    def test_decrement_lowers_count(self):
        self.repo.increment(self.book)
        self.repo.increment(self.book)

        self.assertTrue(self.repo.decrement(self.book))

        self.assertEqual(self.repo.get(self.book), 1)

    def test_decrement_to_zero_deletes_row(self):
        self.repo.increment(self.book)

        self.assertTrue(self.repo.decrement(self.book))

        self.assertFalse(counter_rows(self.book).exists())
        self.assertEqual(self.repo.get(self.book), 0)

    def test_decrement_without_row_is_noop(self):
        with self.assertLogs("likeable.repos.counter_repo", level="WARNING"):
            self.assertFalse(self.repo.decrement(self.book))

        self.assertFalse(LikeCounter.objects.exists())

    def test_decrement_removes_stale_zero_row(self):
        LikeCounter.objects.create(
            content_type=ContentType.objects.get_for_model(self.book),
            object_id=self.book.pk,
            count=0,
        )

        self.repo.decrement(self.book)

        self.assertFalse(counter_rows(self.book).exists())

    def test_remove_all(self):
        self.repo.increment(self.book)
        self.repo.increment(self.book, "bookmark")

        self.assertEqual(self.repo.remove_all(self.book), 1)
        self.assertEqual(self.repo.get(self.book, "bookmark"), 1)


class RebuildTestCase(TestCase):
    def setUp(self):
        self.like_repo = LikeRepo()
        self.repo = LikeCounterRepo(like_repo=self.like_repo)
        self.first = make_book()
        self.second = make_book()
        for _ in range(3):
            self.first.like(make_user())
        for _ in range(4):
            self.second.like(make_user())

    def test_rebuild_after_truncate(self):
        LikeCounter.objects.all().delete()

        created = self.repo.rebuild(Book)

        self.assertEqual(created, 2)
        self.assertEqual(LikeCounter.objects.count(), 2)
        self.assertEqual(self.first.like_count, 3)
        self.assertEqual(self.second.like_count, 4)

    def test_rebuild_replaces_drifted_counters(self):
        counter_rows(self.first).update(count=42)
        LikeCounter.objects.create(
            content_type=ContentType.objects.get_for_model(Book),
            object_id=999999,
            count=5,
        )

        self.repo.rebuild(Book)

        self.assertEqual(self.first.like_count, 3)
        self.assertEqual(LikeCounter.objects.count(), 2)

    def test_rebuild_one_row_per_type(self):
        user = make_user()
        self.first.like(user, "bookmark")
        LikeCounter.objects.all().delete()

        self.assertEqual(self.repo.rebuild(Book), 3)
        self.assertEqual(self.first.get_like_count("bookmark"), 1)

    def test_rebuild_drops_anonymous_contributions(self):
        self.first.like(0)
        self.assertEqual(self.first.like_count, 4)

        self.repo.rebuild(Book)

        self.assertEqual(self.first.like_count, 3)

    def test_rebuild_leaves_other_content_types(self):
        article = make_article()
        article.like(make_user())

        self.repo.rebuild(Book)

        self.assertEqual(article.like_count, 1)
        self.assertEqual(
            LikeCounter.objects.filter(content_type=ContentType.objects.get_for_model(Article)).count(),
            1,
        )

    def test_rebuild_accepts_label_instance_and_content_type(self):
        LikeCounter.objects.all().delete()

        self.assertEqual(self.repo.rebuild("testapp.book"), 2)
        self.assertEqual(self.repo.rebuild(self.first), 2)
        self.assertEqual(self.repo.rebuild(ContentType.objects.get_for_model(Book)), 2)
        self.assertEqual(LikeCounter.objects.count(), 2)

    def test_rebuild_unknown_label(self):
        with self.assertRaises(LookupError):
            self.repo.rebuild("testapp.nothing")

    def test_rebuild_logs_summary(self):
        with self.assertLogs("likeable.repos.counter_repo", level="INFO") as logs:
            self.repo.rebuild(Book)

        self.assertIn("created 2", logs.output[0])
