"""Site-list parsing."""

from sitepercolation.parse.sites import ParseError, SiteList, parse_sites, read_sites

__all__ = ["ParseError", "SiteList", "parse_sites", "read_sites"]
