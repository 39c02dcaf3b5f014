""" Textual graph formats """
