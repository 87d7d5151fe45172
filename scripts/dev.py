#!/usr/bin/env python3
"""
Development helper scripts for the Amber API client.
Runs the client against the live API using the configured API key.
"""

import asyncio
import sys
from pathlib import Path
from typing import List

# Add project root to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from amber_api.config import settings
from amber_api.logging_config import setup_logging
from amber_api.models import Price, Site
from amber_api.services import AmberClient
from amber_api.services.amber_client import PRICE_RESOLUTION


def _require_api_key() -> str:
    if not settings.api_key:
        print("No API key configured. Set AMBER_API_KEY or add it to .env")
        sys.exit(1)
    return settings.api_key


def _print_prices(prices: List[Price]) -> None:
    if not prices:
        print("No prices returned")
        return

    print("-" * 88)
    print(f"{'Start':<20} {'Type':<18} {'Channel':<10} {'c/kWh':>8} {'Spot':>8} {'Renew %':>8} {'Spike':<8}")
    print("-" * 88)

    for price in prices:
        print(f"{price.start_time.strftime('%Y-%m-%d %H:%M'):<20} "
              f"{price.type:<18} {price.channel_type:<10} "
              f"{price.per_kwh:>8.2f} {price.spot_per_kwh:>8.2f} "
              f"{price.renewables:>8.1f} {price.spike_status:<8}")


async def _first_site(client: AmberClient) -> Site:
    sites = await client.get_sites()
    if not sites:
        print("No sites linked to this API key")
        sys.exit(1)
    if len(sites) > 1:
        print(f"Found {len(sites)} sites, using {sites[0].id}")
    return sites[0]


async def show_sites():
    """List the sites linked to the API key."""
    setup_logging()

    async with AmberClient(_require_api_key()) as client:
        sites = await client.get_sites()

    print(f"Found {len(sites)} site(s):")
    for site in sites:
        print(f"  {site.id}  NMI {site.nmi}")


async def show_current_prices():
    """Display current prices for the first site."""
    setup_logging()

    async with AmberClient(_require_api_key()) as client:
        site = await _first_site(client)
        prices = await client.get_current_prices(site)

    print(f"\nCurrent prices for site {site.id}:")
    _print_prices(prices)


async def show_forecast():
    """Display the 24-hour general channel forecast for the first site."""
    setup_logging()

    async with AmberClient(_require_api_key()) as client:
        site = await _first_site(client)
        prices = await client.get_forecast_general_prices(site)

    print(f"\nGeneral channel forecast for site {site.id} ({len(prices)} intervals):")
    _print_prices(prices)

    if prices:
        cheapest = min(prices, key=lambda p: p.per_kwh)
        print(f"\nCheapest interval starts at {cheapest.start_time.isoformat()} "
              f"({cheapest.per_kwh:.2f} c/kWh)")


def show_config():
    """Display current configuration settings."""
    print("Current Configuration:")
    print("-" * 40)
    print(f"Base URL: {settings.base_url}")
    print(f"API Key: {'set' if settings.api_key else 'not set'}")
    print(f"Request Timeout: {settings.request_timeout}s")
    print(f"Price Resolution: {PRICE_RESOLUTION} minutes")
    print(f"Log Level: {settings.log_level}")
    print(f"Log Format: {settings.log_format}")


def main():
    """Main script entry point with command selection."""
    if len(sys.argv) < 2:
        print("Amber API Development Scripts")
        print("Usage: python scripts/dev.py <command>")
        print("\nAvailable commands:")
        print("  show-config     - Display current configuration")
        print("  sites           - List sites for the API key")
        print("  current-prices  - Display current prices for the first site")
        print("  forecast        - Display general channel forecast for the first site")
        return

    command = sys.argv[1]

    if command == "show-config":
        show_config()
    elif command == "sites":
        asyncio.run(show_sites())
    elif command == "current-prices":
        asyncio.run(show_current_prices())
    elif command == "forecast":
        asyncio.run(show_forecast())
    else:
        print(f"Unknown command: {command}")
        print("Run without arguments to see available commands")


if __name__ == "__main__":
    main()
