"""Jobly: companies, jobs and applications REST API."""
