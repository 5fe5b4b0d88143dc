class ParseError(Exception):
    """Base parse error"""
    def __init__(self, message, start_index, end_index):
        super(ParseError, self).__init__(message)
        #: A text description of the error
        self.message = message
        #: Index of the first token where the problem is
        self.start_index = start_index
        #: Index of the last token where the problem is
        self.end_index = end_index


class NoParseError(ParseError):
    """Indicates recovery dropped every token without finding a derivation"""
    def __init__(self, message, start_index, end_index, token_count):
        super(NoParseError, self).__init__(message, start_index, end_index)
        #: Number of real tokens in the stream before recovery started dropping them
        self.token_count = token_count


class GrammarError(Exception):
    """Indicates a rule set that the chart engine cannot work with"""
    pass
