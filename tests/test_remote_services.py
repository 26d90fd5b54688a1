#!/usr/bin/env python3
"""
Unit tests for the HTTP-backed services (BeerApiService, FestivalService).

All network access is mocked.

Run with:
    python -m pytest tests/test_remote_services.py
"""
import json
import os
import sys
import unittest
from unittest.mock import MagicMock, patch

import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from festival.models import Festival
from festival.services import (
    BeerApiException, BeerApiService, FestivalService, FestivalServiceException,
    FestivalsResponse,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _ok_resp(body):
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = body
    resp.content = json.dumps(body, ensure_ascii=False).encode('utf-8')
    return resp


def _status_resp(code):
    resp = MagicMock()
    resp.status_code = code
    return resp


def _catalog(*products, producer='Oakham'):
    return {'producers': [{'id': 'p1', 'name': producer, 'location': 'Peterborough',
                           'products': list(products)}]}


FESTIVAL = Festival(id='cbf2025', name='CBF 2025', data_base_url='https://data.test/cbf2025',
                    available_beverage_types=['beer', 'cider', 'mead'])

FESTIVALS_BODY = {
    'festivals': [
        {'id': 'cbf2024', 'name': 'CBF 2024', 'data_base_url': 'https://data.test/cbf2024'},
        {'id': 'cbf2025', 'name': 'CBF 2025', 'data_base_url': 'https://data.test/cbf2025',
         'is_active': True},
    ],
    'default_festival_id': 'cbf2025',
    'version': '2.1.0',
    'last_updated': '2025-05-01T10:00:00Z',
}


# ===========================================================================
# BeerApiService
# ===========================================================================

class TestBeerApiFetchDrinks(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.svc = BeerApiService(session=self.session, timeout=5)

    def test_parses_producers_and_products(self):
        self.session.get.return_value = _ok_resp(_catalog(
            {'id': 'd1', 'name': 'Citra', 'abv': '4.2'},
            {'id': 'd2', 'name': 'JHB', 'abv': 3.8},
        ))
        drinks = self.svc.fetch_drinks(FESTIVAL, 'beer')
        self.assertEqual([d.id for d in drinks], ['d1', 'd2'])
        self.assertEqual(drinks[0].brewery_name, 'Oakham')
        self.assertEqual(drinks[0].festival_id, 'cbf2025')
        self.assertEqual(drinks[0].abv, 4.2)
        self.session.get.assert_called_once_with(
            'https://data.test/cbf2025/beer.json', timeout=5)

    def test_body_decoded_as_utf8(self):
        resp = _ok_resp(_catalog({'id': 'd1', 'name': 'Rosé Cider'}))
        resp.encoding = 'ISO-8859-1'
        self.session.get.return_value = resp
        self.assertEqual(self.svc.fetch_drinks(FESTIVAL, 'cider')[0].name, 'Rosé Cider')

    def test_404_is_empty(self):
        self.session.get.return_value = _status_resp(404)
        self.assertEqual(self.svc.fetch_drinks(FESTIVAL, 'mead'), [])

    def test_other_status_raises(self):
        self.session.get.return_value = _status_resp(503)
        with self.assertRaises(BeerApiException) as ctx:
            self.svc.fetch_drinks(FESTIVAL, 'beer')
        self.assertEqual(ctx.exception.status_code, 503)

    def test_transport_error_propagates(self):
        self.session.get.side_effect = requests.ConnectionError('down')
        with self.assertRaises(requests.ConnectionError):
            self.svc.fetch_drinks(FESTIVAL, 'beer')

    @patch('festival.services.beer_api_service.requests.Session')
    def test_creates_own_session(self, mock_session_cls):
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        svc = BeerApiService()
        svc.close()
        mock_session.close.assert_called_once()


class TestBeerApiFetchAllDrinks(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.svc = BeerApiService(session=self.session)
        self.responses = {}
        self.session.get.side_effect = lambda url, timeout: self.responses[url]

    def _respond(self, beverage_type, resp):
        self.responses[FESTIVAL.beverage_url(beverage_type)] = resp

    def test_concatenates_in_beverage_type_order(self):
        self._respond('beer', _ok_resp(_catalog({'id': 'b1', 'name': 'Bitter'})))
        self._respond('cider', _ok_resp(_catalog({'id': 'c1', 'name': 'Scrumpy'})))
        self._respond('mead', _ok_resp(_catalog({'id': 'm1', 'name': 'Mead'})))
        drinks = self.svc.fetch_all_drinks(FESTIVAL)
        self.assertEqual([d.id for d in drinks], ['b1', 'c1', 'm1'])

    def test_partial_failure_is_logged_not_raised(self):
        self._respond('beer', _ok_resp(_catalog({'id': 'b1', 'name': 'Bitter'})))
        self._respond('cider', _status_resp(500))
        self._respond('mead', _status_resp(404))
        with self.assertLogs('tapster.api', level='WARNING'):
            drinks = self.svc.fetch_all_drinks(FESTIVAL)
        self.assertEqual([d.id for d in drinks], ['b1'])

    def test_total_failure_raises_with_details(self):
        self._respond('beer', _status_resp(500))
        self._respond('cider', _status_resp(502))
        self._respond('mead', _status_resp(404))
        with self.assertLogs('tapster.api', level='WARNING'):
            with self.assertRaises(BeerApiException) as ctx:
                self.svc.fetch_all_drinks(FESTIVAL)
        self.assertIn('beer', str(ctx.exception))
        self.assertIn('cider', str(ctx.exception))
        self.assertIsNone(ctx.exception.status_code)

    def test_all_404_is_empty_not_error(self):
        for t in ('beer', 'cider', 'mead'):
            self._respond(t, _status_resp(404))
        self.assertEqual(self.svc.fetch_all_drinks(FESTIVAL), [])


# ===========================================================================
# FestivalService
# ===========================================================================

class TestFestivalsResponse(unittest.TestCase):

    def test_from_json(self):
        resp = FestivalsResponse.from_json(FESTIVALS_BODY)
        self.assertEqual(len(resp.festivals), 2)
        self.assertEqual(resp.version, '2.1.0')
        self.assertEqual(resp.last_updated.year, 2025)
        self.assertEqual(resp.default_festival.id, 'cbf2025')
        self.assertEqual([f.id for f in resp.active_festivals], ['cbf2025'])

    def test_version_default_and_lenient_timestamp(self):
        body = dict(FESTIVALS_BODY, last_updated='yesterday')
        del body['version']
        resp = FestivalsResponse.from_json(body)
        self.assertEqual(resp.version, '1.0.0')
        self.assertIsNone(resp.last_updated)

    def test_default_falls_back_to_first(self):
        resp = FestivalsResponse.from_json(dict(FESTIVALS_BODY, default_festival_id='gone'))
        self.assertEqual(resp.default_festival.id, 'cbf2024')

    def test_default_none_when_empty(self):
        self.assertIsNone(FestivalsResponse([], 'x').default_festival)


class TestFestivalService(unittest.TestCase):

    def setUp(self):
        self.session = MagicMock()
        self.svc = FestivalService('https://registry.test/festivals.json',
                                   session=self.session, timeout=10)

    def test_fetch(self):
        self.session.get.return_value = _ok_resp(FESTIVALS_BODY)
        resp = self.svc.fetch_festivals()
        self.assertEqual(resp.default_festival_id, 'cbf2025')
        self.session.get.assert_called_once_with(
            'https://registry.test/festivals.json', timeout=10)

    def test_error_status_raises(self):
        self.session.get.return_value = _status_resp(404)
        with self.assertRaises(FestivalServiceException) as ctx:
            self.svc.fetch_festivals()
        self.assertEqual(ctx.exception.status_code, 404)


if __name__ == '__main__':
    unittest.main()
