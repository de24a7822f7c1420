"""Building blocks for HTTP load testing: dates, cookies, a logical cache, statistics, URL files and a worker pool."""

__version__ = "0.1.0"