
from . cache import is_cached
from . fetcher import Fetcher, fetch_dataset
from . loader import DatasetLoader
from . spread import spread_dataset, to_canonical, iter_quads, subject_graph

