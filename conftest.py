""" Lets the tests import the package and the worked examples straight from a checkout. """
