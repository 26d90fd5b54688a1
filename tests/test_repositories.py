#!/usr/bin/env python3
"""
Unit tests for festival/repositories.

The drink catalog is mocked; favorites, ratings, tasting log and festival
selection use the real services over a temporary preferences file.

Run with:
    python -m pytest tests/test_repositories.py
"""
import datetime
import os
import shutil
import sys
import tempfile
import unittest
from unittest.mock import MagicMock

import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from festival.models import Drink, Festival, Producer, Product
from festival.repositories import (
    ApiDrinkRepository, ApiFestivalRepository, DrinkRepository, FestivalRepository,
)
from festival.services import (
    BeerApiException, BeerApiService, FavoritesService, FestivalService,
    FestivalsResponse, FestivalStorageService, RatingsService, TastingLogService,
)
from festival.storage import PreferencesStore


FESTIVAL = Festival(id='cbf2025', name='CBF 2025', data_base_url='https://data.test/cbf2025')


def _drink(did):
    return Drink(product=Product(id=did, name=f'Drink {did}'),
                 producer=Producer(id='p1', name='Oakham'),
                 festival_id=FESTIVAL.id)


class TmpDirMixin(unittest.TestCase):
    """Creates a fresh temp directory and preferences store for each test."""

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self._orig = os.getcwd()
        os.chdir(self.tmp)
        self.store = PreferencesStore(os.path.join(self.tmp, 'prefs.json'))

    def tearDown(self):
        os.chdir(self._orig)
        shutil.rmtree(self.tmp, ignore_errors=True)


# ===========================================================================
# Contracts
# ===========================================================================

class TestContracts(unittest.TestCase):

    def test_interfaces_are_abstract(self):
        with self.assertRaises(TypeError):
            DrinkRepository()
        with self.assertRaises(TypeError):
            FestivalRepository()

    def test_implementations_satisfy_contracts(self):
        self.assertTrue(issubclass(ApiDrinkRepository, DrinkRepository))
        self.assertTrue(issubclass(ApiFestivalRepository, FestivalRepository))


# ===========================================================================
# ApiDrinkRepository
# ===========================================================================

class TestApiDrinkRepository(TmpDirMixin):

    def setUp(self):
        super().setUp()
        self.api = MagicMock(spec=BeerApiService)
        self.favorites = FavoritesService(self.store)
        self.ratings = RatingsService(self.store)
        self.tasting = TastingLogService(self.store)
        self.repo = ApiDrinkRepository(
            api_service=self.api,
            favorites_service=self.favorites,
            ratings_service=self.ratings,
            tasting_log_service=self.tasting,
        )

    def test_get_drinks_annotates_each_drink(self):
        self.api.fetch_all_drinks.return_value = [_drink('d1'), _drink('d2')]
        self.favorites.toggle_favorite('cbf2025', 'd1')
        self.ratings.set_rating('cbf2025', 'd1', 4)
        self.tasting.mark_as_tasted('cbf2025', 'd2')

        d1, d2 = self.repo.get_drinks(FESTIVAL)

        self.assertEqual((d1.id, d1.is_favorite, d1.rating, d1.is_tasted),
                         ('d1', True, 4, False))
        self.assertEqual((d2.id, d2.is_favorite, d2.rating, d2.is_tasted),
                         ('d2', False, None, True))
        self.api.fetch_all_drinks.assert_called_once_with(FESTIVAL)

    def test_get_drinks_keeps_catalog_order_and_identity(self):
        catalog = [_drink('d3'), _drink('d1'), _drink('d2')]
        self.api.fetch_all_drinks.return_value = catalog
        result = self.repo.get_drinks(FESTIVAL)
        self.assertIs(result, catalog)
        self.assertEqual([d.id for d in result], ['d3', 'd1', 'd2'])

    def test_get_drinks_clears_stale_annotations(self):
        stale = _drink('d1')
        stale.is_favorite, stale.rating, stale.is_tasted = True, 5, True
        self.api.fetch_all_drinks.return_value = [stale]
        drink, = self.repo.get_drinks(FESTIVAL)
        self.assertFalse(drink.is_favorite)
        self.assertIsNone(drink.rating)
        self.assertFalse(drink.is_tasted)

    def test_get_drinks_empty_catalog(self):
        self.api.fetch_all_drinks.return_value = []
        self.assertEqual(self.repo.get_drinks(FESTIVAL), [])

    def test_get_drinks_propagates_catalog_failure(self):
        self.api.fetch_all_drinks.side_effect = BeerApiException('boom', 500)
        with self.assertRaises(BeerApiException):
            self.repo.get_drinks(FESTIVAL)

    def test_get_drinks_propagates_transport_failure(self):
        self.api.fetch_all_drinks.side_effect = requests.Timeout('slow')
        with self.assertRaises(requests.Timeout):
            self.repo.get_drinks(FESTIVAL)

    def test_get_favorites_lists_ids(self):
        self.favorites.toggle_favorite('cbf2025', 'd1')
        self.favorites.toggle_favorite('cbf2025', 'd2')
        self.assertEqual(sorted(self.repo.get_favorites('cbf2025')), ['d1', 'd2'])
        self.assertEqual(self.repo.get_favorites('cbfw2025'), [])

    def test_toggle_favorite_twice_restores(self):
        self.assertTrue(self.repo.toggle_favorite('cbf2025', 'd1'))
        self.assertIn('d1', self.repo.get_favorites('cbf2025'))
        self.assertFalse(self.repo.toggle_favorite('cbf2025', 'd1'))
        self.assertNotIn('d1', self.repo.get_favorites('cbf2025'))

    def test_rating_round_trip(self):
        self.repo.set_rating('cbf2025', 'd1', 5)
        self.assertEqual(self.repo.get_rating('cbf2025', 'd1'), 5)
        self.repo.remove_rating('cbf2025', 'd1')
        self.assertIsNone(self.repo.get_rating('cbf2025', 'd1'))

    def test_invalid_rating_propagates(self):
        with self.assertRaises(ValueError):
            self.repo.set_rating('cbf2025', 'd1', 6)

    def test_toggle_tasted_returns_new_state(self):
        self.assertTrue(self.repo.toggle_tasted('cbf2025', 'd1'))
        self.assertTrue(self.repo.has_tasted('cbf2025', 'd1'))
        self.assertEqual(self.repo.get_tasted_drinks('cbf2025'), ['d1'])
        self.assertFalse(self.repo.toggle_tasted('cbf2025', 'd1'))
        self.assertFalse(self.repo.has_tasted('cbf2025', 'd1'))

    def test_favorite_status(self):
        self.assertIsNone(self.repo.get_favorite_status('cbf2025', 'd1'))
        self.repo.toggle_favorite('cbf2025', 'd1')
        self.assertEqual(self.repo.get_favorite_status('cbf2025', 'd1'), 'want_to_try')
        self.repo.mark_as_tasted('cbf2025', 'd1')
        self.assertEqual(self.repo.get_favorite_status('cbf2025', 'd1'), 'tasted')

    def test_tries(self):
        earlier = datetime.datetime(2025, 5, 19, 12, 0)
        self.favorites.mark_as_tasted('cbf2025', 'd1', now=earlier)
        self.repo.mark_as_tasted('cbf2025', 'd1')
        self.assertEqual(self.repo.get_try_count('cbf2025', 'd1'), 2)
        self.repo.delete_try('cbf2025', 'd1', earlier)
        self.assertEqual(self.repo.get_try_count('cbf2025', 'd1'), 1)
        self.assertEqual(self.repo.get_try_count('cbf2025', 'unknown'), 0)


class TestApiDrinkRepositoryDelegation(unittest.TestCase):
    """Pass-through calls hit exactly one collaborator with the same arguments."""

    def setUp(self):
        self.api = MagicMock()
        self.favorites = MagicMock()
        self.ratings = MagicMock()
        self.tasting = MagicMock()
        self.repo = ApiDrinkRepository(
            api_service=self.api,
            favorites_service=self.favorites,
            ratings_service=self.ratings,
            tasting_log_service=self.tasting,
        )

    def test_delete_try_forwards_timestamp(self):
        ts = datetime.datetime(2025, 5, 20, 18, 0)
        self.repo.delete_try('cbf2025', 'd1', ts)
        self.favorites.delete_try.assert_called_once_with('cbf2025', 'd1', ts)

    def test_get_tasted_drinks_forwards(self):
        self.tasting.get_tasted_drink_ids.return_value = ['d9']
        self.assertEqual(self.repo.get_tasted_drinks('cbf2025'), ['d9'])
        self.tasting.get_tasted_drink_ids.assert_called_once_with('cbf2025')

    def test_collaborator_errors_propagate_unchanged(self):
        err = OSError('disk full')
        self.ratings.set_rating.side_effect = err
        with self.assertRaises(OSError) as ctx:
            self.repo.set_rating('cbf2025', 'd1', 3)
        self.assertIs(ctx.exception, err)

    def test_get_drinks_reads_favorites_once(self):
        self.api.fetch_all_drinks.return_value = [_drink('d1'), _drink('d2')]
        self.favorites.get_favorites.return_value = {}
        self.ratings.get_rating.return_value = None
        self.tasting.has_tasted.return_value = False
        self.repo.get_drinks(FESTIVAL)
        self.favorites.get_favorites.assert_called_once_with('cbf2025')
        self.assertEqual(self.ratings.get_rating.call_count, 2)


# ===========================================================================
# ApiFestivalRepository
# ===========================================================================

class TestApiFestivalRepository(TmpDirMixin):

    def setUp(self):
        super().setUp()
        self.festival_service = MagicMock(spec=FestivalService)
        self.repo = ApiFestivalRepository(
            festival_service=self.festival_service,
            storage_service=FestivalStorageService(self.store),
        )

    def test_get_festivals(self):
        response = FestivalsResponse([FESTIVAL], 'cbf2025')
        self.festival_service.fetch_festivals.return_value = response
        self.assertIs(self.repo.get_festivals(), response)

    def test_get_festivals_propagates_failure(self):
        self.festival_service.fetch_festivals.side_effect = requests.ConnectionError()
        with self.assertRaises(requests.ConnectionError):
            self.repo.get_festivals()

    def test_selection(self):
        self.assertIsNone(self.repo.get_selected_festival_id())
        self.repo.set_selected_festival_id('cbf2025')
        self.assertEqual(self.repo.get_selected_festival_id(), 'cbf2025')

    def test_selection_persists(self):
        self.repo.set_selected_festival_id('cbfw2025')
        other = ApiFestivalRepository(
            festival_service=self.festival_service,
            storage_service=FestivalStorageService(PreferencesStore(self.store.path)),
        )
        self.assertEqual(other.get_selected_festival_id(), 'cbfw2025')


if __name__ == '__main__':
    unittest.main()
