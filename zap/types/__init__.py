from .appentry import AppEntry, CollectorResult, HandleKind, Source
