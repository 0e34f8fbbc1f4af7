"""
Generic statistical methods, free of any segment or verdict vocabulary.
"""
