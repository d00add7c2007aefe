"""Individual checks: email, url, ip, length, range, contains, regex, must-match, control characters and required."""