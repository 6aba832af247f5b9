import os

# current-tag value before any start tag has been seen
ROOT_TAG = os.environ.get('WORDTAGS_ROOT_TAG', 'root')
LOG_LEVEL = os.environ.get('WORDTAGS_LOG_LEVEL', 'INFO')
STEM_WORDS = os.environ.get('WORDTAGS_STEM', '0').lower() in ('1', 'true', 'yes')
