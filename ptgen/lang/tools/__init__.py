""" Tools shared by the language front-ends. """
