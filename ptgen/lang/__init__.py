""" Language front-ends. """
