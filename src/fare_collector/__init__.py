"""Fare collector for the train price search service."""
