"""Offline bookkeeping core: record store, invoice totals and services."""
