class RenderOptions:
    """ A collection of settings regarding the rendered output """
    def __init__(self):
        self.settings = {}

        # Initialize defaults:
        self.set('document_class', 'article')
        self.set('environment', 'equation')
        self.set('graph_name', '')

    def set(self, setting, value):
        self.settings[setting] = value

    def __getitem__(self, index):
        return self.settings[index]

    def process_args(self, args):
        """ Given a set of parsed arguments, apply those """
        self.set('document_class', args.document_class)
        self.set('environment', args.environment)
        self.set('graph_name', args.graph_name)

    @classmethod
    def from_args(cls, args):
        o = cls()
        o.process_args(args)
        return o
