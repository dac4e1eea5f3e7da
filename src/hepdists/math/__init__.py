"""
Mathematical functions and distributions of hepdists.
"""
