"""Telemetry bootstrap for hosted pages.

This package resolves the telemetry configuration of a page session,
derives the dependency-tracking exclusions and the redacted user
correlation token, and provides the enrichment hook and page view payload
handed to the telemetry SDK client.
"""
