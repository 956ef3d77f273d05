"""A multi-threaded checker for broken links on a web site."""

from __future__ import annotations

import argparse
import ipaddress
import queue
import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

DEFAULT_START_URL = "https://www.google.org"
DEFAULT_THREAD_COUNT = 16


class CrawlError(Exception):
    """Raised when a page cannot be fetched."""


class BadResponse(CrawlError):
    """Raised when a page answers with a non-success HTTP status."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links on it."""

    url: str
    extract_links: bool


def _domain(url: str) -> Optional[str]:
    """Return the host name of a URL, or None for IP addresses and no host."""
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


class CrawlState:
    """What the crawl has seen so far and which domain it stays within."""

    def __init__(self, start_url: str) -> None:
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages: set[str] = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Whether links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark the page as visited; return False if it already was."""
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs of the links on it."""
    print(f"Checking {command.url}")
    try:
        response = session.get(command.url)
    except requests.RequestException as error:
        raise CrawlError(f"request error: {error}") from error
    if not 200 <= response.status_code < 300:
        raise BadResponse(f"{response.status_code} {response.reason or ''}".strip())

    if not command.extract_links:
        return []

    base_url = response.url
    soup = BeautifulSoup(response.text, "html.parser")
    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(urljoin(base_url, href))
        except ValueError as error:
            print(f"On {base_url}: ignored unparsable {href!r}: {error}")
    return links


@dataclass
class _Outcome:
    url: str
    links: list[str] = field(default_factory=list)
    error: Optional[BaseException] = None


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while (command := commands.get()) is not None:
            try:
                results.put(_Outcome(command.url, visit_page(session, command)))
            except Exception as error:  # reported back to the controller
                results.put(_Outcome(command.url, error=error))


def _control_crawl(start_url: str, commands: queue.Queue, results: queue.Queue) -> list[str]:
    state = CrawlState(start_url)
    commands.put(CrawlCommand(start_url, extract_links=True))
    pending = 1
    bad_urls = []
    while pending > 0:
        outcome = results.get()
        pending -= 1
        if outcome.error is None:
            for url in outcome.links:
                if state.mark_visited(url):
                    commands.put(CrawlCommand(url, state.should_extract_links(url)))
                    pending += 1
        elif isinstance(outcome.error, CrawlError):
            bad_urls.append(outcome.url)
            print(f"Got crawling error: {outcome.error}")
        else:
            raise outcome.error
    return bad_urls


def check_links(start_url: str, thread_count: int = DEFAULT_THREAD_COUNT) -> list[str]:
    """Crawl the site at ``start_url`` and return the URLs that failed.

    Links are followed only within the start URL's domain; pages elsewhere
    are fetched once to check them but not searched for further links.
    """
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")
    commands: queue.Queue[Optional[CrawlCommand]] = queue.Queue()
    results: queue.Queue[_Outcome] = queue.Queue()
    workers = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()
    try:
        return _control_crawl(start_url, commands, results)
    finally:
        for _ in workers:
            commands.put(None)
        for worker in workers:
            worker.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the links of a site and print the bad ones."""
    parser = argparse.ArgumentParser(description="Find broken links on a web site.")
    parser.add_argument("url", nargs="?", default=DEFAULT_START_URL)
    parser.add_argument("--threads", type=int, default=DEFAULT_THREAD_COUNT)
    args = parser.parse_args(argv)
    bad_urls = check_links(args.url, args.threads)
    print(f"Bad URLs: {bad_urls!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())