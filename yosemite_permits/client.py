import time
from concurrent.futures import ThreadPoolExecutor

import requests

from yosemite_permits.config import API_URL, COMMON_HEADERS, MAX_RETRIES, MAX_WORKERS, REQUEST_TIMEOUT
from yosemite_permits.decoder import decode_report, decode_trailheads
from yosemite_permits.errors import PermitError
from yosemite_permits.logger import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES = {429, 500, 502, 503, 504}


class YosemiteClient:
    """Fetches trailhead metadata and occupancy reports from the wildtrails backend."""

    def __init__(self, cookies, session=None, timeout=REQUEST_TIMEOUT, max_retries=MAX_RETRIES, retry_delay=2.0):
        self.session = session or requests.Session()
        self.session.headers.update(COMMON_HEADERS)
        self.session.headers['Cookie'] = cookies
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    def _get(self, params):
        """GET the query endpoint, retrying connection errors and 429/5xx responses."""
        attempt = 0
        while True:
            attempt += 1
            try:
                resp = self.session.get(API_URL, params=params, timeout=self.timeout)
                if resp.status_code in RETRY_STATUS_CODES and attempt <= self.max_retries:
                    logger.warning(f"Got {resp.status_code} for {params}, retrying ({attempt}/{self.max_retries})")
                else:
                    resp.raise_for_status()
                    return resp.json()
            except (requests.ConnectionError, requests.Timeout) as e:
                if attempt > self.max_retries:
                    raise
                logger.warning(f"Request for {params} failed: {e}, retrying ({attempt}/{self.max_retries})")

            time.sleep(self.retry_delay * attempt)

    def fetch_trailheads(self):
        """Fetch and decode all trailheads."""
        trailheads = decode_trailheads(self._get({'resource': 'trailheads'}))
        logger.info(f"Fetched {len(trailheads)} trailheads")
        return trailheads

    def fetch_report(self, region):
        """Fetch and decode the occupancy report for one region."""
        entries = decode_report(self._get({'resource': 'report', 'region': region}))
        logger.info(f"Fetched {len(entries)} occupancy entries for region {region}")
        return entries

    def fetch_reports(self, regions, max_workers=MAX_WORKERS):
        """
        Fetch occupancy reports for several regions concurrently.

        A region that fails to fetch or decode is logged and skipped; the
        entries of all other regions are returned.
        """
        regions = list(regions)
        if not regions:
            return []

        entries = []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {region: executor.submit(self.fetch_report, region) for region in regions}
            for region, future in futures.items():
                try:
                    entries.extend(future.result())
                except (requests.RequestException, PermitError) as e:
                    logger.error(f"Skipping region {region}: {e}")
        return entries

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
