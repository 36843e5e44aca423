"""Django project package for the network service."""
