"""
Inspiration Aggregator Module

Fetches a random quote and a random image URL in parallel and combines them
into a single response.
"""
