import pandas as pd

from ..insert import insert, read_only

not_appendable_types = pd.DataFrame, pd.Series, pd.Index

insert.register(not_appendable_types, object)(read_only)
