"""User-facing message templates. Outer layers format against these."""

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"

MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Person: {}"
MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Person: {}"

MESSAGE_ADD_PERSON_SUCCESS = "New person added: {}"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the roster"
MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {}"

MESSAGE_ADD_APPOINTMENT_SUCCESS = "New appointment added: {}"

MESSAGE_LIST_ALL_SUCCESS = "Listed all persons"
MESSAGE_LIST_ROLE_SUCCESS = "Listed all {}s"

MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Medibook as requested ..."
