#!/usr/bin/env python3
"""
Tapster - Festival Drink Browser
Browse a beer festival's drink list, keep favorites, ratings and a tasting log.
"""

import argparse
import datetime
import json
import logging
import os
import sys
from typing import Dict, List, Optional, Set

import requests
from colorama import init, Fore, Style

from festival.models import (
    DEFAULT_FESTIVAL,
    AvailabilityStatus,
    Drink,
    Festival,
    FestivalStatus,
    sort_by_date,
    status_in_context,
)
from festival.repositories import (
    ApiDrinkRepository,
    ApiFestivalRepository,
    DrinkRepository,
    FestivalRepository,
)
from festival.services import (
    DEFAULT_FESTIVALS_URL,
    BeerApiException,
    BeerApiService,
    DrinkFilterService,
    DrinkSort,
    DrinkSortService,
    FavoritesService,
    FestivalService,
    FestivalServiceException,
    FestivalStorageService,
    RatingsService,
    TastingLogService,
)
from festival.storage import PreferencesStore

# Initialize colorama for cross-platform colored terminal output
init(autoreset=True)

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

def setup_logging(level: str = 'WARNING') -> logging.Logger:
    """Configure the root Tapster logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to WARNING so normal use is quiet.

    Returns:
        Configured logger instance.
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger('tapster')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger


logger = setup_logging()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_CONFIG = {
    'festivals_url': DEFAULT_FESTIVALS_URL,
    'api_timeout_seconds': 30,
    'data_file': '.tapster_prefs.json',
    'log_level': 'WARNING',
    'max_workers': 4,
}


def load_config(config_path: str = 'config.json') -> Dict:
    """Load configuration from JSON file with environment variable support.

    A missing file means built-in defaults.  Environment variables take
    precedence over config file values:
    - TAPSTER_FESTIVALS_URL overrides festivals_url
    - TAPSTER_DATA_FILE overrides data_file
    - TAPSTER_LOG_LEVEL overrides log_level
    - TAPSTER_API_TIMEOUT overrides api_timeout_seconds

    Raises:
        ValueError: if the file is not a JSON object or the timeout is not a number.
    """
    config = dict(DEFAULT_CONFIG)

    if os.path.exists(config_path):
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file '{config_path}' must contain a JSON object")
        config.update(data)

    if os.getenv('TAPSTER_FESTIVALS_URL'):
        config['festivals_url'] = os.getenv('TAPSTER_FESTIVALS_URL')
    if os.getenv('TAPSTER_DATA_FILE'):
        config['data_file'] = os.getenv('TAPSTER_DATA_FILE')
    if os.getenv('TAPSTER_LOG_LEVEL'):
        config['log_level'] = os.getenv('TAPSTER_LOG_LEVEL')
    if os.getenv('TAPSTER_API_TIMEOUT'):
        config['api_timeout_seconds'] = os.getenv('TAPSTER_API_TIMEOUT')

    try:
        config['api_timeout_seconds'] = float(config['api_timeout_seconds'])
    except (TypeError, ValueError):
        raise ValueError(
            f"api_timeout_seconds must be a number, got {config['api_timeout_seconds']!r}")
    return config


# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------

def friendly_error_message(error: BaseException) -> str:
    """Turn a load failure into a message fit for the user."""
    if isinstance(error, BeerApiException):
        code = error.status_code
        if code == 404:
            return 'Festival data not found. Please try a different festival.'
        if code is not None and code >= 500:
            return 'Server error. Please try again later.'
        if code is not None and code >= 400:
            return 'Could not load drinks. Please try again.'
        return 'Could not load drinks. Please check your connection.'
    if isinstance(error, FestivalServiceException):
        code = error.status_code
        if code == 404:
            return 'Festival list not found. Please try again later.'
        if code is not None and code >= 500:
            return 'Server error. Please try again later.'
        return 'Could not load festivals. Please check your connection.'
    # ConnectTimeout is both a timeout and a connection error; report the timeout.
    if isinstance(error, (requests.Timeout, TimeoutError)):
        return 'Request timed out. Please check your connection and try again.'
    if isinstance(error, (requests.ConnectionError, ConnectionError)):
        return 'No internet connection. Please check your network.'
    return 'Something went wrong. Please try again.'


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

class FestivalBrowser:
    """Holds the festival list, the current festival's drinks and the
    active filters, and keeps loaded drinks in step with user changes."""

    DRINKS_STALENESS = datetime.timedelta(hours=1)
    FESTIVALS_STALENESS = datetime.timedelta(hours=24)

    def __init__(self, drink_repository: DrinkRepository,
                 festival_repository: FestivalRepository,
                 filter_service: Optional[DrinkFilterService] = None,
                 sort_service: Optional[DrinkSortService] = None) -> None:
        self.drink_repository = drink_repository
        self.festival_repository = festival_repository
        self.filter_service = filter_service or DrinkFilterService()
        self.sort_service = sort_service or DrinkSortService()
        self._log = logging.getLogger('tapster.browser')

        self.festivals: List[Festival] = []
        self.all_drinks: List[Drink] = []
        self.drinks: List[Drink] = []
        self._current_festival: Optional[Festival] = None
        self.error: Optional[str] = None
        self.festivals_error: Optional[str] = None
        self.last_drinks_refresh: Optional[datetime.datetime] = None
        self.last_festivals_refresh: Optional[datetime.datetime] = None

        self.selected_category: Optional[str] = None
        self.selected_styles: Set[str] = set()
        self.current_sort = DrinkSort.NAME_ASC
        self.search_query = ''
        self.show_favorites_only = False
        self.hide_unavailable = False

    @classmethod
    def from_config(cls, config: Dict) -> 'FestivalBrowser':
        """Wire every service and repository from a :func:`load_config` dict."""
        store = PreferencesStore(config['data_file'])
        timeout = config['api_timeout_seconds']
        drink_repository = ApiDrinkRepository(
            api_service=BeerApiService(timeout=timeout,
                                       max_workers=int(config['max_workers'])),
            favorites_service=FavoritesService(store),
            ratings_service=RatingsService(store),
            tasting_log_service=TastingLogService(store),
        )
        festival_repository = ApiFestivalRepository(
            festival_service=FestivalService(config['festivals_url'], timeout=timeout),
            storage_service=FestivalStorageService(store),
        )
        return cls(drink_repository, festival_repository)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def current_festival(self) -> Festival:
        return self._current_festival or DEFAULT_FESTIVAL

    @property
    def sorted_festivals(self) -> List[Festival]:
        return sort_by_date(self.festivals)

    @property
    def available_categories(self) -> List[str]:
        return sorted({d.category for d in self.all_drinks})

    def _category_drinks(self, category: Optional[str]) -> List[Drink]:
        if category is None:
            return self.all_drinks
        return [d for d in self.all_drinks if d.category == category]

    def available_styles(self, category: Optional[str] = None) -> List[str]:
        """Distinct non-empty styles, limited to *category* when given."""
        return sorted({d.style for d in self._category_drinks(category) if d.style})

    @property
    def category_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for drink in self.all_drinks:
            counts[drink.category] = counts.get(drink.category, 0) + 1
        return counts

    def style_counts(self, category: Optional[str] = None) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for drink in self._category_drinks(category):
            if drink.style:
                counts[drink.style] = counts.get(drink.style, 0) + 1
        return counts

    @property
    def favorite_drinks(self) -> List[Drink]:
        return [d for d in self.all_drinks if d.is_favorite]

    def get_festival_by_id(self, festival_id: str) -> Optional[Festival]:
        return next((f for f in self.festivals if f.id == festival_id), None)

    def is_valid_festival_id(self, festival_id: Optional[str]) -> bool:
        return bool(festival_id) and self.get_festival_by_id(festival_id) is not None

    def get_drink_by_id(self, drink_id: str) -> Optional[Drink]:
        return next((d for d in self.all_drinks if d.id == drink_id), None)

    def is_drinks_data_stale(self, now: Optional[datetime.datetime] = None) -> bool:
        if self.last_drinks_refresh is None:
            return True
        now = now or datetime.datetime.now()
        return now - self.last_drinks_refresh > self.DRINKS_STALENESS

    def is_festivals_data_stale(self, now: Optional[datetime.datetime] = None) -> bool:
        if self.last_festivals_refresh is None:
            return True
        now = now or datetime.datetime.now()
        return now - self.last_festivals_refresh > self.FESTIVALS_STALENESS

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Load festivals, then restore the saved selection if it still exists."""
        self.load_festivals()
        saved_id = self.festival_repository.get_selected_festival_id()
        if saved_id is not None:
            saved = self.get_festival_by_id(saved_id)
            if saved is not None:
                self._current_festival = saved

    def load_festivals(self) -> None:
        try:
            response = self.festival_repository.get_festivals()
        except Exception as e:
            self._log.warning("Could not load festivals: %s", e)
            self.festivals_error = friendly_error_message(e)
            self.festivals = []
            return
        self.festivals = response.festivals
        if self._current_festival is None and response.default_festival is not None:
            self._current_festival = response.default_festival
        self.festivals_error = None
        self.last_festivals_refresh = datetime.datetime.now()

    def load_drinks(self) -> None:
        if self._current_festival is None:
            if not self.festivals:
                self.load_festivals()
            if self._current_festival is None:
                self._current_festival = DEFAULT_FESTIVAL
        self._load_drinks_for_current()

    def _load_drinks_for_current(self) -> None:
        festival = self.current_festival
        try:
            self.all_drinks = self.drink_repository.get_drinks(festival)
        except Exception as e:
            self._log.exception("Failed to load drinks for festival: %s", festival.id)
            self.error = friendly_error_message(e)
            self.all_drinks = []
            self.drinks = []
            return
        self.error = None
        self.last_drinks_refresh = datetime.datetime.now()
        self._apply_filters_and_sort()

    def set_festival(self, festival: Festival, persist: bool = True) -> None:
        """Switch to *festival*, clearing filters and reloading drinks.

        With ``persist=False`` the choice lasts for this session only.
        """
        if self._current_festival is not None and self._current_festival.id == festival.id:
            return
        self._current_festival = festival
        self.selected_category = None
        self.selected_styles = set()
        self.search_query = ''
        self.all_drinks = []
        self.drinks = []
        self.error = None
        if persist:
            self.festival_repository.set_selected_festival_id(festival.id)
        self._load_drinks_for_current()

    def refresh_if_stale(self, now: Optional[datetime.datetime] = None) -> None:
        if self.is_festivals_data_stale(now):
            self.load_festivals()
        if self.is_drinks_data_stale(now):
            self.load_drinks()

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def _apply_filters_and_sort(self) -> None:
        filtered = self.filter_service.apply_all_filters(
            self.all_drinks,
            category=self.selected_category,
            styles=self.selected_styles,
            favorites_only=self.show_favorites_only,
            hide_unavailable=self.hide_unavailable,
            search_query=self.search_query,
        )
        self.drinks = self.sort_service.sort_drinks(filtered, self.current_sort)

    def filtered_drinks(self, category: Optional[str] = None,
                        styles: Optional[Set[str]] = None,
                        search_query: str = '',
                        favorites_only: bool = False,
                        hide_unavailable: bool = False,
                        sort: DrinkSort = DrinkSort.NAME_ASC) -> List[Drink]:
        """Apply filters and sort order in one call and return the result."""
        self.selected_category = category
        self.selected_styles = set(styles or ())
        self.search_query = search_query.lower()
        self.show_favorites_only = favorites_only
        self.hide_unavailable = hide_unavailable
        self.current_sort = DrinkSort(sort)
        self._apply_filters_and_sort()
        return self.drinks

    def set_category(self, category: Optional[str]) -> None:
        self.selected_category = category
        # Styles depend on the category.
        self.selected_styles = set()
        self._apply_filters_and_sort()

    def toggle_style(self, style: str) -> None:
        if style in self.selected_styles:
            self.selected_styles = self.selected_styles - {style}
        else:
            self.selected_styles = self.selected_styles | {style}
        self._apply_filters_and_sort()

    def set_sort(self, sort: DrinkSort) -> None:
        self.current_sort = DrinkSort(sort)
        self._apply_filters_and_sort()

    def set_search_query(self, query: str) -> None:
        self.search_query = query.lower()
        self._apply_filters_and_sort()

    # ------------------------------------------------------------------
    # User state
    # ------------------------------------------------------------------

    def toggle_favorite(self, drink: Drink) -> bool:
        drink.is_favorite = self.drink_repository.toggle_favorite(
            self.current_festival.id, drink.id)
        if self.show_favorites_only:
            self._apply_filters_and_sort()
        return drink.is_favorite

    def set_rating(self, drink: Drink, rating: Optional[int]) -> None:
        """Rate *drink* 1-5, or clear its rating with ``None``."""
        if rating is None:
            self.remove_rating(drink)
            return
        self.drink_repository.set_rating(self.current_festival.id, drink.id, rating)
        drink.rating = rating

    def remove_rating(self, drink: Drink) -> None:
        self.drink_repository.remove_rating(self.current_festival.id, drink.id)
        drink.rating = None

    def toggle_tasted(self, drink: Drink) -> bool:
        drink.is_tasted = self.drink_repository.toggle_tasted(
            self.current_festival.id, drink.id)
        return drink.is_tasted


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

_STATUS_COLORS = {
    FestivalStatus.LIVE: Fore.GREEN,
    FestivalStatus.UPCOMING: Fore.CYAN,
    FestivalStatus.MOST_RECENT: Fore.YELLOW,
    FestivalStatus.PAST: Fore.WHITE,
}

_AVAILABILITY_LABELS = {
    AvailabilityStatus.PLENTY: f'{Fore.GREEN}plenty',
    AvailabilityStatus.LOW: f'{Fore.YELLOW}low',
    AvailabilityStatus.OUT: f'{Fore.RED}sold out',
    AvailabilityStatus.NOT_YET_AVAILABLE: f'{Fore.WHITE}not yet',
}


def print_festivals(browser: FestivalBrowser) -> None:
    ordered = browser.sorted_festivals
    if not ordered:
        print(f"{Fore.YELLOW}No festivals available.")
        return
    current_id = browser.current_festival.id
    print(f"\n{Fore.CYAN}{Style.BRIGHT}Festivals")
    print(f"{Fore.WHITE}{'=' * 60}")
    for festival in ordered:
        status = status_in_context(festival, ordered)
        marker = '*' if festival.id == current_id else ' '
        color = _STATUS_COLORS[status]
        dates = festival.formatted_dates
        print(f"{Fore.YELLOW}{marker} {festival.id:<12} {Fore.WHITE}{festival.name}"
              f"{Fore.WHITE}{'  ' + dates if dates else ''}"
              f"  {color}[{status.value.replace('_', ' ')}]")


def format_drink(drink: Drink) -> str:
    marks = ''
    marks += f"{Fore.YELLOW}★ " if drink.is_favorite else '  '
    marks += f"{Fore.GREEN}✓ " if drink.is_tasted else '  '
    line = (f"{marks}{Fore.CYAN}{drink.id:<8} {Fore.WHITE}{Style.BRIGHT}{drink.name}"
            f"{Style.NORMAL}{Fore.WHITE} - {drink.brewery_name} ({drink.abv:.1f}%)")
    if drink.style:
        line += f" {Fore.WHITE}{drink.style}"
    if drink.rating is not None:
        line += f" {Fore.YELLOW}{'*' * drink.rating}"
    if drink.availability_status is not None:
        line += f" {_AVAILABILITY_LABELS[drink.availability_status]}"
    return line


def print_drinks(browser: FestivalBrowser, drinks: List[Drink]) -> None:
    festival = browser.current_festival
    print(f"\n{Fore.CYAN}{Style.BRIGHT}{festival.name}"
          f"{Style.NORMAL}{Fore.WHITE} - {len(drinks)} of {len(browser.all_drinks)} drinks")
    print(f"{Fore.WHITE}{'=' * 60}")
    if not drinks:
        print(f"{Fore.YELLOW}No drinks match the filter criteria.")
        return
    for drink in drinks:
        print(format_drink(drink))


def print_stats(browser: FestivalBrowser) -> None:
    print(f"\n{Fore.CYAN}{Style.BRIGHT}{browser.current_festival.name} statistics")
    print(f"{Fore.WHITE}{'=' * 60}")
    for category, count in sorted(browser.category_counts.items()):
        print(f"{Fore.YELLOW}{category:<20} {Fore.WHITE}{count}")
        for style, style_count in sorted(browser.style_counts(category).items()):
            print(f"  {Fore.WHITE}{style:<30} {style_count}")
    print(f"{Fore.YELLOW}Favorites: {Fore.WHITE}{len(browser.favorite_drinks)}")


def print_festival_log(browser: FestivalBrowser) -> None:
    festival_id = browser.current_festival.id
    repo = browser.drink_repository
    drink_ids = repo.get_favorites(festival_id)
    print(f"\n{Fore.CYAN}{Style.BRIGHT}Festival log - {browser.current_festival.name}")
    print(f"{Fore.WHITE}{'=' * 60}")
    if not drink_ids:
        print(f"{Fore.YELLOW}Your festival log is empty.")
        return
    for drink_id in drink_ids:
        drink = browser.get_drink_by_id(drink_id)
        name = drink.name if drink else drink_id
        status = repo.get_favorite_status(festival_id, drink_id) or ''
        tries = repo.get_try_count(festival_id, drink_id)
        label = f"{Fore.GREEN}tasted x{tries}" if status == 'tasted' else f"{Fore.CYAN}want to try"
        print(f"{Fore.WHITE}{name:<40} {label}")


def _require_drink(browser: FestivalBrowser, drink_id: str) -> Drink:
    drink = browser.get_drink_by_id(drink_id)
    if drink is None:
        print(f"{Fore.RED}Error: No drink with ID '{drink_id}' at {browser.current_festival.name}")
        sys.exit(1)
    return drink


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Tapster - Festival Drink Browser',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 tapster.py                          # List drinks at the current festival
  python3 tapster.py --festivals              # List all festivals
  python3 tapster.py --select cbf2025         # Switch festival and remember it
  python3 tapster.py --category beer --sort abv_high --hide-unavailable
  python3 tapster.py --favorite 1234          # Add or remove a favorite
  python3 tapster.py --rate 1234 4            # Rate a drink 1-5
  python3 tapster.py --try 1234               # Record a tasting in the festival log
        """
    )

    parser.add_argument(
        '--config', '-c',
        default='config.json',
        help='Path to config file (default: config.json)'
    )
    parser.add_argument(
        '--festivals', '-f',
        action='store_true',
        help='List all festivals and exit'
    )
    parser.add_argument(
        '--festival',
        metavar='ID',
        help='Browse this festival without changing the saved selection'
    )
    parser.add_argument(
        '--select',
        metavar='ID',
        help='Switch to this festival and remember the choice'
    )
    parser.add_argument(
        '--category',
        help='Only show drinks in this category (e.g., "beer", "cider")'
    )
    parser.add_argument(
        '--style',
        help='Only show these style(s), comma-separated (e.g., "IPA,Stout")'
    )
    parser.add_argument(
        '--search', '-s',
        default='',
        help='Search drink name, brewery, style and notes'
    )
    parser.add_argument(
        '--favorites-only',
        action='store_true',
        help='Only show favorite drinks'
    )
    parser.add_argument(
        '--hide-unavailable',
        action='store_true',
        help='Hide drinks that are sold out or not yet available'
    )
    parser.add_argument(
        '--sort',
        choices=[s.value for s in DrinkSort],
        default=DrinkSort.NAME_ASC.value,
        help='Sort order (default: name_asc)'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Show drink counts by category and style and exit'
    )
    parser.add_argument(
        '--favorite',
        metavar='DRINK_ID',
        help='Toggle a drink in your favorites'
    )
    parser.add_argument(
        '--rate',
        nargs=2,
        metavar=('DRINK_ID', 'RATING'),
        help='Rate a drink from 1 to 5'
    )
    parser.add_argument(
        '--unrate',
        metavar='DRINK_ID',
        help="Remove a drink's rating"
    )
    parser.add_argument(
        '--tasted',
        metavar='DRINK_ID',
        help='Toggle the tasted flag on a drink'
    )
    parser.add_argument(
        '--try',
        dest='record_try',
        metavar='DRINK_ID',
        help='Record a tasting of a drink in the festival log'
    )
    parser.add_argument(
        '--log',
        action='store_true',
        help='Show the festival log and exit'
    )

    args = parser.parse_args()

    try:
        try:
            config = load_config(args.config)
        except ValueError as e:
            print(f"{Fore.RED}Error parsing config file: {e}")
            sys.exit(1)
        setup_logging(config['log_level'])

        browser = FestivalBrowser.from_config(config)
        browser.initialize()
        if browser.festivals_error:
            print(f"{Fore.YELLOW}{browser.festivals_error}")

        if args.festivals:
            print_festivals(browser)
            return

        target_id = args.select or args.festival
        if target_id:
            festival = browser.get_festival_by_id(target_id)
            if festival is None:
                print(f"{Fore.RED}Error: Unknown festival '{target_id}'")
                sys.exit(1)
            browser.set_festival(festival, persist=bool(args.select))
            if args.select:
                print(f"{Fore.GREEN}Selected {festival.name}")

        browser.refresh_if_stale()
        if browser.error:
            print(f"{Fore.RED}{browser.error}")
            sys.exit(1)

        fid = browser.current_festival.id
        if args.favorite:
            drink = _require_drink(browser, args.favorite)
            if browser.toggle_favorite(drink):
                print(f"{Fore.GREEN}Added {drink.name} to favorites!")
            else:
                print(f"{Fore.GREEN}Removed {drink.name} from favorites!")
            return
        if args.rate:
            drink = _require_drink(browser, args.rate[0])
            try:
                rating = int(args.rate[1])
                browser.set_rating(drink, rating)
            except ValueError:
                print(f"{Fore.RED}Error: Rating must be a whole number from 1 to 5")
                sys.exit(1)
            print(f"{Fore.GREEN}Rated {drink.name} {rating}/5")
            return
        if args.unrate:
            drink = _require_drink(browser, args.unrate)
            browser.remove_rating(drink)
            print(f"{Fore.GREEN}Cleared rating for {drink.name}")
            return
        if args.tasted:
            drink = _require_drink(browser, args.tasted)
            state = 'tasted' if browser.toggle_tasted(drink) else 'not tasted'
            print(f"{Fore.GREEN}Marked {drink.name} as {state}")
            return
        if args.record_try:
            drink = _require_drink(browser, args.record_try)
            browser.drink_repository.mark_as_tasted(fid, drink.id)
            count = browser.drink_repository.get_try_count(fid, drink.id)
            print(f"{Fore.GREEN}Logged a tasting of {drink.name} ({count} so far)")
            return
        if args.log:
            print_festival_log(browser)
            return
        if args.stats:
            print_stats(browser)
            return

        styles = None
        if args.style:
            styles = {s.strip() for s in args.style.split(',') if s.strip()}
        drinks = browser.filtered_drinks(
            category=args.category,
            styles=styles,
            search_query=args.search,
            favorites_only=args.favorites_only,
            hide_unavailable=args.hide_unavailable,
            sort=DrinkSort(args.sort),
        )
        print_drinks(browser, drinks)
    except KeyboardInterrupt:
        print(f"\n\n{Fore.YELLOW}Interrupted by user. Goodbye!")
    except Exception as e:
        print(f"\n{Fore.RED}An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
