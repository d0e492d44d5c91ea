"""Site optimiser: crawl a site, classify and extract its pages, rewrite the copy."""

__version__ = "0.1.0"
