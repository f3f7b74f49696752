"""Postman collection generator for Teamcenter SOA structure files."""
