from .certificate import Certificate, load_free_certificate
from .hostname import Hostname, HostnameProvider, find_hostname_id, hostname_schema
